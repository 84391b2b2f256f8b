"""Database models."""

from .base import Base
from .order_model import OrderModel
from .user_model import UserModel

__all__ = ["Base", "OrderModel", "UserModel"]
