"""Password hashing and token signing."""

from .passwords import MAX_PASSWORD_BYTES, PasswordHasher
from .tokens import TokenClaims, TokenService

__all__ = ["MAX_PASSWORD_BYTES", "PasswordHasher", "TokenClaims", "TokenService"]
