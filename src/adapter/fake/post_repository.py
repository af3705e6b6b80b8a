"""In-memory implementation of PostRepository for testing."""

import copy

from domain.model.post import Post


class FakePostRepository:
    def __init__(self):
        self.store: dict[str, Post] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, post: Post) -> None:
        self.store[post.id] = copy.deepcopy(post)

    def save(self, post: Post) -> None:
        self.store[post.id] = copy.deepcopy(post)

    def delete(self, post_id: str) -> bool:
        return self.store.pop(post_id, None) is not None

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, post_id: str) -> Post | None:
        post = self.store.get(post_id)
        return copy.deepcopy(post) if post else None

    def find_all(self) -> list[Post]:
        posts = sorted(self.store.values(), key=lambda p: p.created_at, reverse=True)
        return [copy.deepcopy(p) for p in posts]
