"""Repository interface for the User entity."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.user import User, UserRecord
from ..enums import UserRole


class UserRepository(ABC):
    """Abstract repository owning all store access for users."""

    @abstractmethod
    async def create_user(self, name: str, email: str, password: str) -> int:
        """Hash the password and insert a customer account.

        Raises:
            ConflictError: If the email is already registered
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[UserRecord]:
        """Return the stored row including the password hash."""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Return the user without the password hash."""
        pass

    @abstractmethod
    async def verify_password(self, plain: str, hashed: str) -> bool:
        """Check a password against its hash. Never raises on mismatch."""
        pass

    @abstractmethod
    async def update_role(self, user_id: int, role: UserRole) -> None:
        """Set the role of an existing user.

        Raises:
            NotFoundError: If no user has this id
        """
        pass
