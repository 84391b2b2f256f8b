"""Application service for registration, login and token checks."""

import logging
from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.data.uow import create_uow
from core.domain.entities import User
from core.domain.enums import UserRole
from core.domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from core.infrastructure.security import (
    MAX_PASSWORD_BYTES,
    PasswordHasher,
    TokenClaims,
    TokenService,
)


logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

# Same message for unknown email and wrong password
INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """
    Stateless authentication service.

    No session state is persisted: identity travels in signed tokens,
    and every protected request re-verifies the signature here.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        """Initialize auth service.

        Args:
            session_factory: SQLAlchemy async session factory
            hasher: Password hashing backend
            tokens: Token signer/verifier
        """
        self._session_factory = session_factory
        self._hasher = hasher
        self._tokens = tokens

    async def register(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        confirm_password: Optional[str],
    ) -> int:
        """Create a customer account. No token is issued.

        Returns:
            New user id

        Raises:
            ValidationError: Missing fields, mismatched or too short password
            ConflictError: Email already registered
        """
        # Blank name or email counts as missing; passwords are taken verbatim
        if not (name or "").strip() or not (email or "").strip():
            raise ValidationError("All fields are required")
        if not password or not confirm_password:
            raise ValidationError("All fields are required")
        if password != confirm_password:
            raise ValidationError("Passwords do not match")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes long")

        async with create_uow(self._session_factory, self._hasher) as uow:
            user_id = await uow.users.create_user(name, email, password)
            await uow.commit()

        logger.info(f"Registered user {user_id}")
        return user_id

    async def login(self, email: Optional[str], password: Optional[str]) -> Tuple[str, User]:
        """Check credentials and issue a bearer token.

        Returns:
            (token, user) tuple

        Raises:
            ValidationError: Missing email or password
            AuthenticationError: Unknown email or wrong password
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        async with create_uow(self._session_factory, self._hasher) as uow:
            record = await uow.users.find_by_email(email)
            if record is None:
                raise AuthenticationError(INVALID_CREDENTIALS)
            if not await uow.users.verify_password(password, record.password_hash):
                raise AuthenticationError(INVALID_CREDENTIALS)

        user = record.to_public()
        token = self._tokens.issue(user)
        logger.info(f"User {user.id} logged in")
        return token, user

    def verify_token(self, token: str) -> TokenClaims:
        """Verify a bearer token.

        Raises:
            AuthorizationError: Invalid signature, malformed or expired token
        """
        return self._tokens.verify(token)

    @staticmethod
    def authorize(claims: Optional[TokenClaims], role: UserRole) -> TokenClaims:
        """Require an authenticated identity holding `role`.

        Raises:
            AuthenticationError: No identity
            AuthorizationError: Identity has a different role
        """
        if claims is None:
            raise AuthenticationError("Authentication required")
        if claims.role != role:
            raise AuthorizationError(f"Access denied. {role.value.capitalize()} role required.")
        return claims

    async def get_user(self, user_id: int) -> User:
        """Return the public view of a user.

        Raises:
            NotFoundError: Unknown user id
        """
        async with create_uow(self._session_factory, self._hasher) as uow:
            user = await uow.users.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def update_role(self, user_id: int, role: UserRole) -> None:
        """Change a user's role.

        Raises:
            NotFoundError: Unknown user id
        """
        async with create_uow(self._session_factory, self._hasher) as uow:
            await uow.users.update_role(user_id, role)
            await uow.commit()
        logger.info(f"User {user_id} is now {role.value}")
