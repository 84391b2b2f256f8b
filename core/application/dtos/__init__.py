"""Application DTOs."""

from .auth_dto import (
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UpdateRoleRequest,
    UserDTO,
)
from .order_dto import (
    CreateOrderRequest,
    CreateOrderResponse,
    ErrorResponse,
    MessageResponse,
    OrderDTO,
    OrderItemDTO,
    UpdateOrderStatusRequest,
    UpdateOrderStatusResponse,
)
from .product_dto import ProductDTO

__all__ = [
    "CreateOrderRequest",
    "CreateOrderResponse",
    "CurrentUserResponse",
    "ErrorResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "OrderDTO",
    "OrderItemDTO",
    "ProductDTO",
    "RegisterRequest",
    "RegisterResponse",
    "UpdateOrderStatusRequest",
    "UpdateOrderStatusResponse",
    "UpdateRoleRequest",
    "UserDTO",
]
