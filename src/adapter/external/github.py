"""GitHub adapter.

Implements RepositoryHostPort by listing a user's public repositories
through the GitHub REST API.
"""

import logging
import os
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)

GITHUB_API_BASE_URL = "https://api.github.com"
API_TIMEOUT_SECONDS = 5.0
REPO_LIMIT = 5


class GitHubAdapter:
    """Fetches a GitHub user's first five repositories by creation date, oldest first."""

    def __init__(self, token: str | None = None, base_url: str = GITHUB_API_BASE_URL):
        self._token = token if token is not None else os.getenv("GITHUB_TOKEN")
        self._base_url = base_url

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": "devconnect-api",
            "Accept": "application/vnd.github+json",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def list_repositories(self, username: str) -> list[dict] | None:
        url = f"{self._base_url}/users/{quote(username, safe='')}/repos"
        params = {"per_page": REPO_LIMIT, "sort": "created", "direction": "asc"}

        try:
            async with httpx.AsyncClient(timeout=API_TIMEOUT_SECONDS) as client:
                response = await client.get(url, params=params, headers=self._headers())
        except httpx.HTTPError as e:
            logger.warning("GitHub request failed", extra={"username": username, "error": str(e)})
            return None

        if response.status_code != 200:
            logger.info("GitHub profile not found", extra={
                "username": username, "statusCode": response.status_code,
            })
            return None
        return response.json()
