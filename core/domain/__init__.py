"""Domain layer - pure domain models and interfaces."""

from .entities import LineItem, Order, User, UserRecord
from .enums import OrderStatus, UserRole
from .repositories import OrderRepository, UserRepository

__all__ = [
    "LineItem",
    "Order",
    "OrderRepository",
    "OrderStatus",
    "User",
    "UserRecord",
    "UserRepository",
    "UserRole",
]
