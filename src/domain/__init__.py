"""
Domain models for the Station Load Balancer.

Core business entities: item records from the order export, the orders built
from them, and the fulfillment stations orders are allocated to.
All models use Pydantic for validation and serialization.
"""

from .record import ItemRecord, ParseWarning, Priority, RECORD_FIELDS, MIN_RECORD_FIELDS
from .order import (
    Order,
    OrderStatus,
    AssignmentUpdate,
    PRIORITY_TIME_MULTIPLIER,
    PRIORITY_WEIGHT,
)
from .station import Station, StationStatus, AllocationResult

__all__ = [
    # Records
    "ItemRecord",
    "ParseWarning",
    "Priority",
    "RECORD_FIELDS",
    "MIN_RECORD_FIELDS",
    # Orders
    "Order",
    "OrderStatus",
    "AssignmentUpdate",
    "PRIORITY_TIME_MULTIPLIER",
    "PRIORITY_WEIGHT",
    # Stations
    "Station",
    "StationStatus",
    "AllocationResult",
]
