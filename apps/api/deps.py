"""FastAPI dependencies for dependency injection.

Services are built once by `create_app()` and stored on `app.state`;
these providers only look them up.
"""

from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.application.services import AuthService, CatalogService, OrderApplicationService
from core.domain.enums import UserRole
from core.domain.exceptions import AuthenticationError
from core.infrastructure.security import TokenClaims


# Largest value a SQLite INTEGER primary key can hold
MAX_ROW_ID = 2**63 - 1

bearer_scheme = HTTPBearer(auto_error=False)


def get_order_service(request: Request) -> OrderApplicationService:
    """Get OrderApplicationService instance."""
    return request.app.state.order_service


def get_auth_service(request: Request) -> AuthService:
    """Get AuthService instance."""
    return request.app.state.auth_service


def get_catalog_service(request: Request) -> CatalogService:
    """Get CatalogService instance."""
    return request.app.state.catalog_service


# =============================================================================
# AUTHENTICATION
# =============================================================================

async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenClaims:
    """Verify the bearer token and attach its claims to `request.state.user`.

    Raises:
        AuthenticationError: No bearer token (401)
        AuthorizationError: Invalid or expired token (403)
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access token required")

    claims = auth_service.verify_token(credentials.credentials)
    request.state.user = claims
    return claims


def require_role(role: UserRole) -> Callable:
    """Build a dependency that admits only identities holding `role`.

    Args:
        role: Required role

    Returns:
        Dependency returning the verified claims
    """

    async def dependency(
        request: Request,
        _claims: TokenClaims = Depends(get_current_user),
    ) -> TokenClaims:
        return AuthService.authorize(getattr(request.state, "user", None), role)

    return dependency
