"""
Order Status Enum.

Lifecycle values for a cookie order.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order status values."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
