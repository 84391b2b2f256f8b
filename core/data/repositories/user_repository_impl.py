"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional

from sqlalchemy import insert, select, update

from core.domain.entities import User, UserRecord
from core.domain.enums import UserRole
from core.domain.exceptions import ConflictError, ConstraintViolationError, NotFoundError
from core.domain.repositories import UserRepository
from core.infrastructure.database.adapter import SqlAdapter
from core.infrastructure.security import PasswordHasher

from ..mappers import UserMapper
from ..models.user_model import UserModel


logger = logging.getLogger(__name__)

users = UserModel.__table__

# Everything except the password hash
_PUBLIC_COLUMNS = (users.c.id, users.c.name, users.c.email, users.c.role, users.c.created_at)


class SqlAlchemyUserRepository(UserRepository):
    """Single-table user persistence over the SQL adapter."""

    def __init__(self, db: SqlAdapter, hasher: PasswordHasher) -> None:
        """Initialize repository.

        Args:
            db: Adapter bound to the current session
            hasher: Password hashing backend
        """
        self._db = db
        self._hasher = hasher

    async def create_user(self, name: str, email: str, password: str) -> int:
        """Hash the password and insert a customer account.

        The unique index on `email` is the only duplicate check, so two
        concurrent registrations cannot both succeed.

        Raises:
            ConflictError: If the email is already registered
        """
        hashed = await self._hasher.hash(password)
        try:
            result = await self._db.run(
                insert(users).values(
                    name=name,
                    email=email,
                    password=hashed,
                    role=UserRole.CUSTOMER.value,
                )
            )
        except ConstraintViolationError as e:
            raise ConflictError("Email already registered") from e

        logger.info(f"✅ Created user {result.last_id}")
        return result.last_id

    async def find_by_email(self, email: str) -> Optional[UserRecord]:
        row = await self._db.get(select(users).where(users.c.email == email))
        return UserMapper.to_record(row) if row else None

    async def find_by_id(self, user_id: int) -> Optional[User]:
        row = await self._db.get(select(*_PUBLIC_COLUMNS).where(users.c.id == user_id))
        return UserMapper.to_domain(row) if row else None

    async def verify_password(self, plain: str, hashed: str) -> bool:
        return await self._hasher.verify(plain, hashed)

    async def update_role(self, user_id: int, role: UserRole) -> None:
        """Set the role of an existing user.

        Raises:
            NotFoundError: If no row was changed
        """
        result = await self._db.run(
            update(users).where(users.c.id == user_id).values(role=UserRole(role).value)
        )
        if result.changes == 0:
            raise NotFoundError("User not found")

        logger.info(f"✅ User {user_id} role -> {UserRole(role).value}")
