"""Repository implementations."""

from .order_repository_impl import SqlAlchemyOrderRepository
from .user_repository_impl import SqlAlchemyUserRepository

__all__ = ["SqlAlchemyOrderRepository", "SqlAlchemyUserRepository"]
