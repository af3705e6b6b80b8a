"""Identity token port: issues and verifies signed, time-bounded tokens."""

from typing import Protocol


class TokenServicePort(Protocol):

    def issue(self, user_id: str) -> str:
        """Return an opaque signed token bound to user_id and an expiry."""
        ...

    def verify(self, token: str) -> str:
        """Return the user_id carried by token.

        Raises InvalidTokenError if the signature does not verify,
        ExpiredTokenError if the expiry has elapsed.
        """
        ...
