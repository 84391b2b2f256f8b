"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import List, Optional

from sqlalchemy import insert, select, update

from core.domain.entities import LineItem, Order
from core.domain.enums import OrderStatus
from core.domain.exceptions import NotFoundError
from core.domain.repositories import OrderRepository
from core.infrastructure.database.adapter import SqlAdapter

from ..mappers import OrderMapper
from ..models.order_model import OrderModel


logger = logging.getLogger(__name__)

orders = OrderModel.__table__


class SqlAlchemyOrderRepository(OrderRepository):
    """Single-table order persistence over the SQL adapter."""

    def __init__(self, db: SqlAdapter) -> None:
        """Initialize repository with the persistence adapter.

        Args:
            db: Adapter bound to the current session
        """
        self._db = db

    async def create_order(
        self,
        name: str,
        phone: str,
        items: List[LineItem],
        notes: Optional[str] = None,
    ) -> int:
        """Insert a new order with status `pending`.

        Returns:
            Store-assigned order id

        Raises:
            ValidationError: If name, phone or items are missing
        """
        Order.validate_new(name, phone, items)

        result = await self._db.run(
            insert(orders).values(
                customer_name=name,
                phone=phone,
                items=OrderMapper.serialize_items(items),
                notes=notes,
                status=OrderStatus.PENDING.value,
            )
        )
        logger.info(f"✅ Created order {result.last_id} ({len(items)} item(s))")
        return result.last_id

    async def list_orders(self) -> List[Order]:
        """Return all orders, newest `created_at` first."""
        rows = await self._db.all(
            select(orders).order_by(orders.c.created_at.desc(), orders.c.id.desc())
        )
        return [OrderMapper.to_domain(row) for row in rows]

    async def get_order(self, order_id: int) -> Optional[Order]:
        row = await self._db.get(select(orders).where(orders.c.id == order_id))
        return OrderMapper.to_domain(row) if row else None

    async def update_status(self, order_id: int, status: str) -> None:
        """Replace the order status in a single statement.

        Raises:
            ValidationError: If status is not a known value
            NotFoundError: If no row was changed
        """
        new_status = Order.parse_status(status)

        result = await self._db.run(
            update(orders).where(orders.c.id == order_id).values(status=new_status.value)
        )
        if result.changes == 0:
            raise NotFoundError("Order not found")

        logger.info(f"✅ Order {order_id} status -> {new_status.value}")
