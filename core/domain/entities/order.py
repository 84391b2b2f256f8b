"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..enums import OrderStatus
from ..exceptions import ValidationError


LineItem = Dict[str, Any]


@dataclass
class Order:
    """
    A customer cookie order.

    Items are kept as plain mappings (at least ``name`` and ``quantity``)
    because they are stored as a JSON blob, not as a relation.
    """
    id: int
    customer_name: str
    phone: str
    items: List[LineItem] = field(default_factory=list)
    notes: Optional[str] = None
    status: OrderStatus = OrderStatus.PENDING
    created_at: Optional[datetime] = None

    @staticmethod
    def validate_new(name: Optional[str], phone: Optional[str], items: Optional[List[LineItem]]) -> None:
        """
        Business rule: name, phone and at least one item are required.

        Raises:
            ValidationError: If any of them is missing or blank
        """
        if not name or not name.strip():
            raise ValidationError("Name is required")
        if not phone or not phone.strip():
            raise ValidationError("Phone is required")
        if not items:
            raise ValidationError("At least one item is required")

    @staticmethod
    def parse_status(status: Optional[str]) -> OrderStatus:
        """
        Convert raw input to an OrderStatus.

        Raises:
            ValidationError: If status is not one of the enumerated values
        """
        try:
            return OrderStatus(status)
        except ValueError:
            raise ValidationError(
                f"Invalid status. Must be one of: {', '.join(OrderStatus.values())}"
            ) from None
