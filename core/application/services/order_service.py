"""Application service for Order operations."""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.application.dtos.order_dto import CreateOrderRequest, OrderDTO
from core.data.uow import create_uow


logger = logging.getLogger(__name__)


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Open one Unit of Work per operation
    - Commit mutations atomically
    - Transform between DTOs and domain entities
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

    async def create_order(self, request: CreateOrderRequest) -> int:
        """Create a new pending order.

        Args:
            request: CreateOrderRequest DTO

        Returns:
            Identifier of the new order

        Raises:
            ValidationError: If name, phone or items are missing
        """
        items = [item.model_dump() for item in request.items]
        async with create_uow(self._session_factory) as uow:
            order_id = await uow.orders.create_order(
                request.name, request.phone, items, request.notes
            )
            await uow.commit()
        return order_id

    async def list_orders(self) -> List[OrderDTO]:
        """List all orders, newest first."""
        async with create_uow(self._session_factory) as uow:
            orders = await uow.orders.list_orders()
        return [OrderDTO.from_entity(order) for order in orders]

    async def update_status(self, order_id: int, status: Optional[str]) -> OrderDTO:
        """Change the status of an existing order.

        Returns:
            The order as stored after the update

        Raises:
            ValidationError: If status is not a known value
            NotFoundError: If the order does not exist
        """
        async with create_uow(self._session_factory) as uow:
            await uow.orders.update_status(order_id, status)
            await uow.commit()
            order = await uow.orders.get_order(order_id)
        return OrderDTO.from_entity(order)
