"""In-memory implementation of RepositoryHostPort for testing."""


class FakeRepositoryHost:
    def __init__(self, repos: dict[str, list[dict]] | None = None):
        self.repos = repos or {}
        self.calls: list[str] = []

    async def list_repositories(self, username: str) -> list[dict] | None:
        self.calls.append(username)
        return self.repos.get(username)
