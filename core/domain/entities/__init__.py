"""Domain entities."""

from .order import LineItem, Order
from .user import User, UserRecord

__all__ = ["LineItem", "Order", "User", "UserRecord"]
