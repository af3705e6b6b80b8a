# domain/model/post.py

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from domain.model.errors import (
    AlreadyLikedError,
    NotFoundError,
    NotLikedError,
    PermissionDeniedError,
)


@dataclass(frozen=True)
class Like:
    """A single like, identified by the liking user."""
    user_id: str


@dataclass
class Comment:
    """Reply on a post. Author name/avatar are a snapshot taken at write time."""
    id: str
    user_id: str
    text: str
    name: str
    avatar: str
    created_at: datetime

    @staticmethod
    def create(user_id: str, text: str, name: str, avatar: str) -> 'Comment':
        return Comment(
            id=uuid.uuid4().hex,
            user_id=user_id,
            text=text,
            name=name,
            avatar=avatar,
            created_at=datetime.now(timezone.utc),
        )

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id


# ── Post Domain Model ────────────────────────────────────


@dataclass
class Post:
    """Feed entry owned by its author.

    `name` and `avatar` are copied from the author when the post is created
    and are not kept in sync with later account changes.
    """
    id: str
    user_id: str
    text: str
    name: str
    avatar: str
    created_at: datetime
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)

    # ── factory ───────────────────────────────────────────

    @staticmethod
    def create(user_id: str, text: str, name: str, avatar: str) -> 'Post':
        return Post(
            id=uuid.uuid4().hex,
            user_id=user_id,
            text=text,
            name=name,
            avatar=avatar,
            created_at=datetime.now(timezone.utc),
        )

    # ── queries ───────────────────────────────────────────

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    def check_ownership(self, user_id: str) -> None:
        """Verify ownership. Raises PermissionDeniedError on mismatch."""
        if not self.is_owned_by(user_id):
            raise PermissionDeniedError("User not authorized")

    def is_liked_by(self, user_id: str) -> bool:
        return any(like.user_id == user_id for like in self.likes)

    def find_comment(self, comment_id: str) -> Comment | None:
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None

    # ── mutations ─────────────────────────────────────────

    def like(self, user_id: str) -> None:
        """Add a like at the head. At most one like per user."""
        if self.is_liked_by(user_id):
            raise AlreadyLikedError()
        self.likes.insert(0, Like(user_id=user_id))

    def unlike(self, user_id: str) -> None:
        """Remove this user's like, looked up by user id."""
        if not self.is_liked_by(user_id):
            raise NotLikedError()
        self.likes = [like for like in self.likes if like.user_id != user_id]

    def add_comment(self, comment: Comment) -> None:
        """Insert at the head (most recent first)."""
        self.comments.insert(0, comment)

    def remove_comment(self, comment_id: str, user_id: str) -> Comment:
        """Remove a single comment by its own id after checking authorship."""
        comment = self.find_comment(comment_id)
        if comment is None:
            raise NotFoundError("Comment does not exist")
        if not comment.is_owned_by(user_id):
            raise PermissionDeniedError("User not authorized")
        self.comments = [c for c in self.comments if c.id != comment_id]
        return comment
