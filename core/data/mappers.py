"""Static mappers for database rows ↔ domain entities."""

import json
from typing import Any, Dict, List

from core.domain.entities import LineItem, Order, User, UserRecord
from core.domain.enums import OrderStatus, UserRole


class OrderMapper:
    """Static mapper for orders rows, including the items blob."""

    @staticmethod
    def serialize_items(items: List[LineItem]) -> str:
        """Encode line items for the `orders.items` text column."""
        return json.dumps(list(items), ensure_ascii=False)

    @staticmethod
    def deserialize_items(raw: str) -> List[LineItem]:
        """Decode the `orders.items` text column back into line items."""
        return json.loads(raw) if raw else []

    @staticmethod
    def to_domain(row: Dict[str, Any]) -> Order:
        """Convert a fetched row to an Order.

        Args:
            row: Column name -> value mapping

        Returns:
            Order domain entity with items deserialized
        """
        return Order(
            id=row["id"],
            customer_name=row["customer_name"],
            phone=row["phone"],
            items=OrderMapper.deserialize_items(row["items"]),
            notes=row["notes"],
            status=OrderStatus(row["status"]),
            created_at=row["created_at"],
        )


class UserMapper:
    """Static mapper for users rows."""

    @staticmethod
    def to_domain(row: Dict[str, Any]) -> User:
        """Convert a row without the password column to a User."""
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            role=UserRole(row["role"]),
            created_at=row["created_at"],
        )

    @staticmethod
    def to_record(row: Dict[str, Any]) -> UserRecord:
        """Convert a full row (with password hash) to a UserRecord."""
        return UserRecord(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            role=UserRole(row["role"]),
            created_at=row["created_at"],
            password_hash=row["password"],
        )
