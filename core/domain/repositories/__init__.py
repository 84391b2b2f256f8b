"""Repository interfaces."""

from .order_repository import OrderRepository
from .user_repository import UserRepository

__all__ = ["OrderRepository", "UserRepository"]
