from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for account data access."""
    def create(self, name: str, email: str, avatar: str, password_hash: str) -> User:
        """Create a new user.

        Raises EmailAlreadyExistsError if the email is already taken.
        """
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def get_by_ids(self, user_ids: list[str]) -> dict[str, User]:
        """Bulk lookup keyed by user ID. Unknown IDs are omitted."""
        ...

    def delete(self, user_id: str) -> bool:
        """Delete a user. Return True if a document was removed."""
        ...
