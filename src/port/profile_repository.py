"""Port for profile data access."""

from typing import Protocol

from domain.model.profile import Profile, ProfileUpdate


class ProfileRepository(Protocol):
    """Protocol for profile documents (one per user, nested lists inline)."""

    def get_by_user(self, user_id: str) -> Profile | None:
        """Get the profile owned by user_id."""
        ...

    def find_all(self) -> list[Profile]:
        """All profiles in insertion order."""
        ...

    def upsert(self, user_id: str, update: ProfileUpdate) -> Profile:
        """Create the profile if absent, else replace the supplied top-level fields.

        A single atomic write; nested lists are never touched.
        """
        ...

    def save(self, profile: Profile) -> None:
        """Replace the whole profile document (used for nested-list edits)."""
        ...

    def delete_by_user(self, user_id: str) -> bool:
        """Delete the profile owned by user_id. Returns True if one was removed."""
        ...
