"""Application services."""
from .auth_service import AuthService
from .catalog_service import CatalogService
from .order_service import OrderApplicationService

__all__ = ["AuthService", "CatalogService", "OrderApplicationService"]
