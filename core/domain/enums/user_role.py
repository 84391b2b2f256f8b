"""
User Role Enum.

Closed set of roles a user account may hold.
"""
from enum import Enum


class UserRole(str, Enum):
    """User role values."""

    CUSTOMER = "customer"
    ADMIN = "admin"
