from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Domain model representing a registered account."""
    id: str
    name: str
    email: str
    avatar: str
    created_at: datetime
    updated_at: datetime
    password_hash: str | None = None

    @property
    def summary(self) -> dict:
        """Public owner card embedded in profile responses."""
        return {'id': self.id, 'name': self.name, 'avatar': self.avatar}
