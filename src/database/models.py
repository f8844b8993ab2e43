"""
SQLAlchemy database models for the Station Load Balancer.

Provides persistent storage for customer orders and their station
assignments.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    String,
    Integer,
    DateTime,
    JSON,
    Index,
)
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


class CustomerOrderRecord(Base):
    """
    Customer order record.

    The full order is kept as JSON; station and status are broken out so
    assignment updates do not need to rewrite the payload.
    """
    __tablename__ = "customer_orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(String(64), unique=True, nullable=False)
    priority = Column(String(20), nullable=False)
    items = Column(Integer, nullable=False, default=0)
    estimated_time = Column(Integer, nullable=False, default=0)

    # Assignment
    station = Column(Integer, nullable=True)
    status = Column(String(20), nullable=False, default="Pending")  # Pending, Assigned

    # Full order in wire format
    payload = Column(JSON, nullable=False)

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        Index("ix_customer_orders_station_status", "station", "status"),
    )
