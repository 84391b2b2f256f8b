"""Repository interface for the Order entity."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import LineItem, Order


class OrderRepository(ABC):
    """Abstract repository owning all store access for orders."""

    @abstractmethod
    async def create_order(
        self,
        name: str,
        phone: str,
        items: List[LineItem],
        notes: Optional[str] = None,
    ) -> int:
        """Insert a new pending order.

        Args:
            name: Customer name
            phone: Contact phone
            items: Line items, at least one
            notes: Free-form notes

        Returns:
            Identifier assigned by the store

        Raises:
            ValidationError: If name, phone or items are missing
        """
        pass

    @abstractmethod
    async def list_orders(self) -> List[Order]:
        """Return all orders, newest first."""
        pass

    @abstractmethod
    async def get_order(self, order_id: int) -> Optional[Order]:
        """Return one order or None."""
        pass

    @abstractmethod
    async def update_status(self, order_id: int, status: str) -> None:
        """Replace the status of an existing order.

        Raises:
            ValidationError: If status is not a known value
            NotFoundError: If no order has this id
        """
        pass
