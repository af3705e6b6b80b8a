"""In-memory implementation of UserRepository for testing."""

import uuid
from datetime import datetime, timezone
from domain.model.errors import EmailAlreadyExistsError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, name: str, email: str, avatar: str, password_hash: str) -> User:
        if any(u.email == email for u in self.store.values()):
            raise EmailAlreadyExistsError()

        now = datetime.now(timezone.utc)
        user = User(
            id=uuid.uuid4().hex,
            name=name,
            email=email,
            avatar=avatar,
            created_at=now,
            updated_at=now,
            password_hash=password_hash,
        )
        self.store[user.id] = user
        return user

    def delete(self, user_id: str) -> bool:
        return self.store.pop(user_id, None) is not None

    # ── read operations ──────────────────────────────────────

    def get_by_email(self, email: str) -> User | None:
        for user in self.store.values():
            if user.email == email:
                return user
        return None

    def get_by_id(self, user_id: str) -> User | None:
        return self.store.get(user_id)

    def get_by_ids(self, user_ids: list[str]) -> dict[str, User]:
        return {uid: self.store[uid] for uid in user_ids if uid in self.store}
