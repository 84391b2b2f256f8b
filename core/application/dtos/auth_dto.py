"""Application DTOs for registration, login and user administration."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from core.domain.entities import User
from core.domain.enums import UserRole


class RegisterRequest(BaseModel):
    """
    Registration form.

    Fields are optional at the schema level so that the auth service
    can report missing input with its own messages.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = Field(None, alias="confirmPassword")

    model_config = ConfigDict(populate_by_name=True)


class RegisterResponse(BaseModel):
    success: bool = True
    message: str = "User registered successfully"
    user_id: int = Field(..., alias="userId")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserDTO(BaseModel):
    """Public user shape; never carries the password."""

    id: int
    name: str
    email: str
    role: UserRole

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(id=user.id, name=user.name, email=user.email, role=user.role)


class LoginResponse(BaseModel):
    success: bool = True
    message: str = "Login successful"
    token: str
    user: UserDTO

    model_config = {"frozen": True}


class CurrentUserResponse(BaseModel):
    success: bool = True
    user: UserDTO

    model_config = {"frozen": True}


class UpdateRoleRequest(BaseModel):
    """Role change; unknown roles are rejected before reaching the repository."""

    role: UserRole
