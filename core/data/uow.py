"""Unit of Work pattern for atomic transactions."""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.exceptions import PersistenceError
from core.infrastructure.database.adapter import SqlAdapter
from core.infrastructure.security import PasswordHasher

from .repositories import SqlAlchemyOrderRepository, SqlAlchemyUserRepository


logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Atomic commit of all repository operations, rollback on error
    3. Lazy initialization of repositories
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        hasher: Optional[PasswordHasher] = None,
    ) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
            hasher: Password hashing backend, required only for `users`
        """
        self._session_factory = session_factory
        self._hasher = hasher
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._order_repository: Optional[SqlAlchemyOrderRepository] = None
        self._user_repository: Optional[SqlAlchemyUserRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Roll back on exception, always close the session."""
        try:
            if exc_type is not None:
                await self._session.rollback()
        finally:
            await self._session.close()
            self._session = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository."""
        if self._order_repository is None:
            self._order_repository = SqlAlchemyOrderRepository(SqlAdapter(self.session))
        return self._order_repository

    @property
    def users(self) -> SqlAlchemyUserRepository:
        """Lazy-load user repository."""
        if self._hasher is None:
            raise RuntimeError("UnitOfWork created without a password hasher.")
        if self._user_repository is None:
            self._user_repository = SqlAlchemyUserRepository(
                SqlAdapter(self.session), self._hasher
            )
        return self._user_repository

    async def commit(self) -> None:
        """Commit all pending changes."""
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Commit failed: {type(e).__name__}: {e}", exc_info=True)
            raise PersistenceError() from e


def create_uow(
    session_factory: async_sessionmaker[AsyncSession],
    hasher: Optional[PasswordHasher] = None,
) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory
        hasher: Password hashing backend

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory, hasher)
