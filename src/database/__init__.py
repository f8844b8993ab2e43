"""
Database layer for the Station Load Balancer.

Provides async SQLAlchemy models and repositories for customer order storage.
"""

from .models import Base, CustomerOrderRecord
from .repository import CustomerOrderRepository
from .session import get_session, init_db, close_db, get_engine

__all__ = [
    "Base",
    "CustomerOrderRecord",
    "CustomerOrderRepository",
    "get_session",
    "init_db",
    "close_db",
    "get_engine",
]
