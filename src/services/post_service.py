"""Post service: feed posts with their likes and comments.

Every like/comment change reads the post, edits it in memory and writes
the whole document back. Ownership and existence are checked after the
read and before anything is written.
"""

import logging

from domain.model.errors import NotFoundError, ValidationError
from domain.model.post import Comment, Like, Post
from domain.model.user import User
from port.post_repository import PostRepository
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


def _require_text(text: str) -> str:
    if not text or not text.strip():
        raise ValidationError("Text is required", param="text")
    return text


def _get_author(user_repo: UserRepository, user_id: str) -> User:
    user = user_repo.get_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


def get_by_id(repo: PostRepository, post_id: str) -> Post:
    post = repo.get_by_id(post_id)
    if not post:
        raise NotFoundError("Post not found")
    return post


def list_all(repo: PostRepository) -> list[Post]:
    """All posts, newest first."""
    return repo.find_all()


def create(
    repo: PostRepository,
    user_repo: UserRepository,
    user_id: str,
    text: str,
) -> Post:
    """Create a post carrying a snapshot of the author's name and avatar."""
    _require_text(text)
    author = _get_author(user_repo, user_id)

    post = Post.create(user_id=user_id, text=text, name=author.name, avatar=author.avatar)
    repo.create(post)
    logger.info("Post created", extra={"postId": post.id, "userId": user_id})
    return post


def delete(repo: PostRepository, user_id: str, post_id: str) -> None:
    """Delete a post. Only its author may do so.

    Raises:
        NotFoundError: no such post
        PermissionDeniedError: caller is not the author
    """
    post = get_by_id(repo, post_id)
    post.check_ownership(user_id)
    repo.delete(post_id)
    logger.info("Post removed", extra={"postId": post_id, "userId": user_id})


def like(repo: PostRepository, user_id: str, post_id: str) -> list[Like]:
    """Raises AlreadyLikedError if the caller already likes the post."""
    post = get_by_id(repo, post_id)
    post.like(user_id)
    repo.save(post)
    logger.info("Post liked", extra={"postId": post_id, "userId": user_id})
    return post.likes


def unlike(repo: PostRepository, user_id: str, post_id: str) -> list[Like]:
    """Raises NotLikedError if the caller has no like on the post."""
    post = get_by_id(repo, post_id)
    post.unlike(user_id)
    repo.save(post)
    logger.info("Post unliked", extra={"postId": post_id, "userId": user_id})
    return post.likes


def add_comment(
    repo: PostRepository,
    user_repo: UserRepository,
    user_id: str,
    post_id: str,
    text: str,
) -> list[Comment]:
    _require_text(text)
    author = _get_author(user_repo, user_id)
    post = get_by_id(repo, post_id)

    comment = Comment.create(user_id=user_id, text=text, name=author.name, avatar=author.avatar)
    post.add_comment(comment)
    repo.save(post)
    logger.info("Comment added", extra={"postId": post_id, "commentId": comment.id, "userId": user_id})
    return post.comments


def remove_comment(
    repo: PostRepository,
    user_id: str,
    post_id: str,
    comment_id: str,
) -> list[Comment]:
    """Remove one comment, matched by its own id, if the caller wrote it.

    Raises:
        NotFoundError: no such post or comment
        PermissionDeniedError: caller is not the comment's author
    """
    post = get_by_id(repo, post_id)
    post.remove_comment(comment_id, user_id)
    repo.save(post)
    logger.info("Comment removed", extra={"postId": post_id, "commentId": comment_id, "userId": user_id})
    return post.comments
