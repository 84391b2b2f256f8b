"""User administration endpoints (admin only)."""

from fastapi import APIRouter, Depends, Path

from core.application.dtos import ErrorResponse, MessageResponse, UpdateRoleRequest
from core.application.services import AuthService
from core.domain.enums import UserRole

from apps.api.deps import MAX_ROW_ID, get_auth_service, require_role

router = APIRouter(
    prefix="/users",
    tags=["users"],
    dependencies=[Depends(require_role(UserRole.ADMIN))],
)


@router.patch(
    "/{user_id}/role",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_user_role(
    request: UpdateRoleRequest,
    user_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    auth_service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    """Grant or revoke the admin role."""
    await auth_service.update_role(user_id, request.role)
    return MessageResponse(message="User role updated")
