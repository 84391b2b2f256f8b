"""
Domain exceptions.

Repositories and services raise these; the API layer maps each kind
to an HTTP status code. Messages are safe to show to clients.
"""


class DomainError(Exception):
    """Base class for all typed failures raised below the API layer."""

    default_message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DomainError):
    """Missing or malformed input."""

    default_message = "Invalid request"


class AuthError(DomainError):
    """Base for authentication and authorization failures."""

    default_message = "Authentication failed"


class AuthenticationError(AuthError):
    """No identity or bad credentials."""

    default_message = "Authentication required"


class AuthorizationError(AuthError):
    """Identity present but invalid, expired, or lacking the required role."""

    default_message = "Access denied"


class ConflictError(DomainError):
    """Entity already exists (duplicate email)."""

    default_message = "Resource already exists"


class NotFoundError(DomainError):
    """Entity with the given identifier does not exist."""

    default_message = "Resource not found"


class PersistenceError(DomainError):
    """Unclassified store failure."""

    default_message = "Database operation failed"


class ConstraintViolationError(PersistenceError):
    """Store rejected a write because of an integrity constraint."""

    default_message = "Database constraint violated"
