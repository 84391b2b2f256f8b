"""Authentication endpoints for REST API."""

from fastapi import APIRouter, Depends, status

from core.application.dtos import (
    CurrentUserResponse,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserDTO,
)
from core.application.services import AuthService
from core.infrastructure.security import TokenClaims

from apps.api.deps import get_auth_service, get_current_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> RegisterResponse:
    """Create a customer account."""
    user_id = await auth_service.register(
        request.name, request.email, request.password, request.confirm_password
    )
    return RegisterResponse(user_id=user_id)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Exchange email and password for a 24h bearer token."""
    token, user = await auth_service.login(request.email, request.password)
    return LoginResponse(token=token, user=UserDTO.from_entity(user))


@router.get(
    "/me",
    response_model=CurrentUserResponse,
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
async def me(
    claims: TokenClaims = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service),
) -> CurrentUserResponse:
    """Return the account behind the bearer token."""
    user = await auth_service.get_user(claims.id)
    return CurrentUserResponse(user=UserDTO.from_entity(user))
