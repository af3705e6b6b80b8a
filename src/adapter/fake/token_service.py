"""In-memory implementation of TokenServicePort for testing."""

import uuid

from domain.model.errors import ExpiredTokenError, InvalidTokenError


class FakeTokenService:
    def __init__(self):
        self.tokens: dict[str, str] = {}
        self.expired: set[str] = set()

    def issue(self, user_id: str) -> str:
        token = f"token-{uuid.uuid4().hex}"
        self.tokens[token] = user_id
        return token

    def verify(self, token: str) -> str:
        if token in self.expired:
            raise ExpiredTokenError("Token has expired")
        user_id = self.tokens.get(token)
        if user_id is None:
            raise InvalidTokenError("Token is not valid")
        return user_id

    def expire(self, token: str) -> None:
        self.expired.add(token)
