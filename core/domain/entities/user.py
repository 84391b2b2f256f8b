"""
User entity.

Two shapes exist on purpose: ``User`` is safe to hand to any caller,
``UserRecord`` carries the password hash and only flows into login.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..enums import UserRole


@dataclass(frozen=True)
class User:
    """Public view of a user account (no password)."""
    id: int
    name: str
    email: str
    role: UserRole = UserRole.CUSTOMER
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class UserRecord(User):
    """Stored user row including the password hash."""
    password_hash: str = field(default="", repr=False)

    def to_public(self) -> User:
        return User(
            id=self.id,
            name=self.name,
            email=self.email,
            role=self.role,
            created_at=self.created_at,
        )
