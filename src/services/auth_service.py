"""Auth service: registration and authentication business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import hashlib
import logging
from urllib.parse import urlencode

import bcrypt

from domain.model.errors import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from domain.model.user import User
from port.token_service import TokenServicePort
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10
MIN_PASSWORD_LENGTH = 6
# bcrypt only hashes the first 72 bytes and newer releases reject longer input
MAX_PASSWORD_BYTES = 72

GRAVATAR_BASE_URL = "https://www.gravatar.com/avatar"
GRAVATAR_OPTIONS = {"s": "200", "r": "pg", "d": "mm"}


def normalize_email(email: str) -> str:
    return email.strip().lower()


def gravatar_url(email: str) -> str:
    """Deterministic avatar URL for an email address."""
    digest = hashlib.md5(normalize_email(email).encode("utf-8")).hexdigest()
    return f"{GRAVATAR_BASE_URL}/{digest}?{urlencode(GRAVATAR_OPTIONS)}"


def _hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def _verify_password(plain: str, hashed: str | None) -> bool:
    if not hashed or len(plain.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))


def _validate_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Please enter a password with {MIN_PASSWORD_LENGTH} or more characters",
            param="password",
        )
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(
            f"Please enter a password of at most {MAX_PASSWORD_BYTES} bytes",
            param="password",
        )


def register(
    repo: UserRepository,
    tokens: TokenServicePort,
    name: str,
    email: str,
    password: str,
) -> tuple[User, str]:
    """Register a new user and issue their first token.

    Raises:
        EmailAlreadyExistsError: email already registered
        ValidationError: password too short
    """
    email = normalize_email(email)
    if repo.get_by_email(email):
        raise EmailAlreadyExistsError()

    _validate_password(password)

    user = repo.create(
        name=name,
        email=email,
        avatar=gravatar_url(email),
        password_hash=_hash_password(password),
    )
    logger.info("User registered", extra={"userId": user.id})
    return user, tokens.issue(user.id)


def authenticate(
    repo: UserRepository,
    tokens: TokenServicePort,
    email: str,
    password: str,
) -> tuple[User, str]:
    """Check an email/password pair and issue a token.

    Unknown email and wrong password raise the same error.

    Raises:
        InvalidCredentialsError: no match
    """
    user = repo.get_by_email(normalize_email(email))
    if not user or not _verify_password(password, user.password_hash):
        raise InvalidCredentialsError()

    logger.info("User authenticated", extra={"userId": user.id})
    return user, tokens.issue(user.id)


def get_account(repo: UserRepository, user_id: str) -> User:
    user = repo.get_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")
    return user
