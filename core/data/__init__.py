"""Data layer - infrastructure persistence and mapping."""

from .mappers import OrderMapper, UserMapper
from .models import Base, OrderModel, UserModel
from .repositories import SqlAlchemyOrderRepository, SqlAlchemyUserRepository
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "OrderMapper",
    "OrderModel",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyUserRepository",
    "UnitOfWork",
    "UserMapper",
    "UserModel",
]
