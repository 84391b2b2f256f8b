"""Application layer - services and DTOs."""

from .dtos import CreateOrderRequest, OrderDTO, OrderItemDTO, ProductDTO, UserDTO
from .services import AuthService, CatalogService, OrderApplicationService

__all__ = [
    # DTOs
    "CreateOrderRequest",
    "OrderDTO",
    "OrderItemDTO",
    "ProductDTO",
    "UserDTO",
    # Services
    "AuthService",
    "CatalogService",
    "OrderApplicationService",
]
