"""SQLAlchemy ORM model for the orders table."""

from sqlalchemy import CheckConstraint, Column, DateTime, Index, Integer, String, Text, func

from core.domain.enums import OrderStatus

from .base import Base


_STATUS_VALUES = ", ".join(f"'{value}'" for value in OrderStatus.values())


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_name = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    # JSON-encoded list of line items, not a relation
    items = Column(Text, nullable=False)
    notes = Column(Text, nullable=True)
    status = Column(
        String(20),
        nullable=False,
        default=OrderStatus.PENDING.value,
        server_default=OrderStatus.PENDING.value,
    )
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint(f"status IN ({_STATUS_VALUES})", name="ck_orders_status"),
        Index("ix_orders_created_at", "created_at"),
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, customer={self.customer_name}, status={self.status})>"
