"""Repository host port: outbound listing of a developer's public repositories."""

from typing import Protocol


class RepositoryHostPort(Protocol):

    async def list_repositories(self, username: str) -> list[dict] | None:
        """Return raw repository dicts, or None if the user is unknown/unreachable."""
        ...
