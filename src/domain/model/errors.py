"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class PermissionDeniedError(DomainError):
    """Caller lacks permission for the requested action."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""

    def __init__(self, message: str, param: str | None = None):
        self.param = param
        super().__init__(message)


# ── Conflicts ────────────────────────────────────────────


class ConflictError(DomainError):
    """Requested change collides with existing state."""


class EmailAlreadyExistsError(ConflictError):
    """An account with the same email is already registered."""

    def __init__(self):
        super().__init__("User already exists")


class AlreadyLikedError(ConflictError):
    """The caller has already liked the post."""

    def __init__(self):
        super().__init__("Post already liked")


class NotLikedError(ConflictError):
    """The caller has no like on the post to remove."""

    def __init__(self):
        super().__init__("Post has not yet been liked")


# ── Authentication ───────────────────────────────────────


class AuthError(DomainError):
    """Base class for identity and credential failures."""


class InvalidTokenError(AuthError):
    """Token signature or structure did not verify."""


class ExpiredTokenError(AuthError):
    """Token verified but its expiry has elapsed."""


class InvalidCredentialsError(AuthError):
    """Email/password pair did not match an account.

    Raised for both unknown emails and wrong passwords so callers
    cannot probe which accounts exist.
    """

    def __init__(self):
        super().__init__("Invalid credentials")
