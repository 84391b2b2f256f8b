"""SQLAlchemy ORM model for the users table."""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, func

from core.domain.enums import UserRole

from .base import Base


class UserModel(Base):
    """SQLAlchemy ORM model for users table."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    # Case-sensitive as stored; uniqueness is the registration source of truth
    email = Column(String(255), nullable=False, unique=True)
    password = Column(String(255), nullable=False)
    role = Column(
        String(20),
        nullable=False,
        default=UserRole.CUSTOMER.value,
        server_default=UserRole.CUSTOMER.value,
    )
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint("role IN ('customer', 'admin')", name="ck_users_role"),
    )

    def __repr__(self):
        return f"<UserModel(id={self.id}, email={self.email}, role={self.role})>"
