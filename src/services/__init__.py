"""
Core services for the Station Load Balancer.

Business logic layer containing:
- Parsing: order export lines to item records
- Aggregation: item records to timed orders
- Allocation: orders to balanced fulfillment stations
- Store: persistence interfaces used by the API layer
"""

from .errors import (
    StationBalancerError,
    ParseError,
    InvalidStationCountError,
    RecordSourceError,
)
from .parsing import RecordParser, parse_records
from .aggregation import OrderAggregator, aggregate_orders
from .allocation import StationAllocator, allocate_stations
from .record_source import load_orders, load_record_text
from .store import OrderStore, AssignmentStore, InMemoryOrderStore

__all__ = [
    "StationBalancerError",
    "ParseError",
    "InvalidStationCountError",
    "RecordSourceError",
    "RecordParser",
    "parse_records",
    "OrderAggregator",
    "aggregate_orders",
    "StationAllocator",
    "allocate_stations",
    "load_orders",
    "load_record_text",
    "OrderStore",
    "AssignmentStore",
    "InMemoryOrderStore",
]
