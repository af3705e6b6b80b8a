"""In-memory implementation of ProfileRepository for testing."""

import copy

from domain.model.profile import Profile, ProfileUpdate


class FakeProfileRepository:
    def __init__(self):
        self.store: dict[str, Profile] = {}

    # Copies in and out, so callers see document semantics rather than shared objects.

    # ── write operations ─────────────────────────────────────

    def upsert(self, user_id: str, update: ProfileUpdate) -> Profile:
        profile = self.store.get(user_id)
        if profile is None:
            profile = Profile.create(user_id, update)
            self.store[user_id] = profile
        else:
            profile.apply(update)
        return copy.deepcopy(profile)

    def save(self, profile: Profile) -> None:
        self.store[profile.user_id] = copy.deepcopy(profile)

    def delete_by_user(self, user_id: str) -> bool:
        return self.store.pop(user_id, None) is not None

    # ── read operations ──────────────────────────────────────

    def get_by_user(self, user_id: str) -> Profile | None:
        profile = self.store.get(user_id)
        return copy.deepcopy(profile) if profile else None

    def find_all(self) -> list[Profile]:
        return [copy.deepcopy(p) for p in self.store.values()]
