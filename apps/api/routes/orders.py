"""Order endpoints for REST API."""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from core.application.dtos import (
    CreateOrderRequest,
    CreateOrderResponse,
    ErrorResponse,
    OrderDTO,
    UpdateOrderStatusRequest,
    UpdateOrderStatusResponse,
)
from core.application.services import OrderApplicationService

from apps.api.deps import MAX_ROW_ID, get_order_service

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post(
    "",
    response_model=CreateOrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_order(
    request: CreateOrderRequest,
    service: OrderApplicationService = Depends(get_order_service),
) -> CreateOrderResponse:
    """Place a new order. It always starts as `pending`.

    Args:
        request: CreateOrderRequest DTO
        service: OrderApplicationService instance

    Returns:
        CreateOrderResponse with the new order id
    """
    order_id = await service.create_order(request)
    return CreateOrderResponse(order_id=order_id)


@router.get("", response_model=List[OrderDTO])
async def list_orders(
    service: OrderApplicationService = Depends(get_order_service),
) -> List[OrderDTO]:
    """List all orders, newest first, with items decoded."""
    return await service.list_orders()


@router.patch(
    "/{order_id}",
    response_model=UpdateOrderStatusResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_order_status(
    request: UpdateOrderStatusRequest,
    order_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    service: OrderApplicationService = Depends(get_order_service),
) -> UpdateOrderStatusResponse:
    """Replace the status of an order.

    Args:
        order_id: Order identifier
        request: New status
        service: OrderApplicationService instance

    Returns:
        Acknowledgement with the updated order
    """
    order = await service.update_status(order_id, request.status)
    return UpdateOrderStatusResponse(order=order)
