"""Application DTOs for Order operations."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.domain.entities import Order
from core.domain.enums import OrderStatus


class OrderItemDTO(BaseModel):
    """DTO for one line item. Extra keys are kept as-is."""

    name: str = Field(..., min_length=1, description="Cookie name")
    quantity: int = Field(..., gt=0, description="Quantity ordered")

    model_config = ConfigDict(extra="allow", frozen=True)


class CreateOrderRequest(BaseModel):
    """Request DTO for creating an order."""

    name: str = Field(..., min_length=1, description="Customer name")
    phone: str = Field(..., min_length=1, description="Contact phone")
    items: List[OrderItemDTO] = Field(..., min_length=1, description="Order items")
    notes: Optional[str] = Field(None, description="Free-form notes")

    model_config = {"frozen": True}


class CreateOrderResponse(BaseModel):
    """Response DTO for a created order."""

    success: bool = True
    message: str = "Order placed successfully"
    order_id: int = Field(..., alias="orderId")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class UpdateOrderStatusRequest(BaseModel):
    """Request DTO for a status change; the value is checked by the repository."""

    status: Optional[str] = Field(None, description="One of pending, confirmed, completed, cancelled")


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: int
    customer_name: str
    phone: str
    items: List[Dict[str, Any]] = Field(default_factory=list)
    notes: Optional[str] = None
    status: OrderStatus
    created_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, order: Order) -> "OrderDTO":
        return cls(
            id=order.id,
            customer_name=order.customer_name,
            phone=order.phone,
            items=order.items,
            notes=order.notes,
            status=order.status,
            created_at=order.created_at,
        )


class MessageResponse(BaseModel):
    """Generic success acknowledgement."""

    success: bool = True
    message: str

    model_config = {"frozen": True}


class UpdateOrderStatusResponse(MessageResponse):
    """Acknowledgement carrying the order as stored after the update."""

    message: str = "Order status updated"
    order: OrderDTO


class ErrorResponse(BaseModel):
    """Body returned for every handled failure."""

    success: bool = False
    error: str

    model_config = {"frozen": True}
