"""JWT implementation of the identity token port (python-jose, HS256)."""

import logging
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt

from domain.model.errors import ExpiredTokenError, InvalidTokenError

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "HS256"
DEFAULT_EXPIRATION = timedelta(hours=10)


class JoseTokenService:
    """Issues and verifies signed identity tokens.

    The signing key is passed in at construction; the API builds one
    instance from configuration at startup.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = DEFAULT_ALGORITHM,
        expires_in: timedelta = DEFAULT_EXPIRATION,
    ):
        if not secret_key:
            raise ValueError("Token signing key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expires_in = expires_in

    def issue(self, user_id: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iat": now,
            "exp": now + self._expires_in,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """Return the user id in `sub`.

        Raises:
            ExpiredTokenError: signature is valid but `exp` has passed
            InvalidTokenError: bad signature, malformed token or missing `sub`
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            raise ExpiredTokenError("Token has expired")
        except JWTError as e:
            logger.debug(f"JWT verification failed: {e}")
            raise InvalidTokenError("Token is not valid")

        user_id = payload.get("sub")
        if not user_id:
            raise InvalidTokenError("Token is not valid")
        return user_id
