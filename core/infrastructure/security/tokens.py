"""
Bearer token issue and verification.

HS256-signed JWTs carrying ``{id, email, role, iat, exp}``.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from core.domain.entities import User
from core.domain.enums import UserRole
from core.domain.exceptions import AuthorizationError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    """Verified identity extracted from a bearer token."""
    id: int
    email: str
    role: UserRole
    iat: int
    exp: int


class TokenService:
    """Signs and verifies access tokens with a process-wide secret."""

    def __init__(self, secret: str, algorithm: str = "HS256", ttl_hours: int = 24) -> None:
        if not secret:
            raise ValueError("Token secret must be provided")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(hours=ttl_hours)

    def issue(self, user: User, now: Optional[datetime] = None) -> str:
        """
        Issue a signed token for `user`.

        Args:
            user: Authenticated user
            now: Issue time (defaults to current UTC time)

        Returns:
            Encoded JWT
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "id": user.id,
            "email": user.email,
            "role": user.role.value,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry.

        Raises:
            AuthorizationError: If the token is malformed, tampered or expired
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["id", "email", "role", "iat", "exp"]},
            )
            return TokenClaims(
                id=int(payload["id"]),
                email=payload["email"],
                role=UserRole(payload["role"]),
                iat=payload["iat"],
                exp=payload["exp"],
            )
        except (jwt.InvalidTokenError, ValueError, TypeError) as e:
            logger.info(f"Rejected token: {type(e).__name__}")
            raise AuthorizationError("Invalid or expired token") from e
