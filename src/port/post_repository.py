"""Port for post data access."""

from typing import Protocol

from domain.model.post import Post


class PostRepository(Protocol):
    """Protocol for post documents with likes and comments stored inline."""

    def create(self, post: Post) -> None:
        """Insert a new post."""
        ...

    def get_by_id(self, post_id: str) -> Post | None:
        """Get a single post by ID."""
        ...

    def find_all(self) -> list[Post]:
        """All posts sorted by created_at descending."""
        ...

    def save(self, post: Post) -> None:
        """Replace the whole post document (likes and comments included)."""
        ...

    def delete(self, post_id: str) -> bool:
        """Delete a post. Returns True if deleted, False if not found."""
        ...
