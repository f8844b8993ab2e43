"""Pytest fixtures for Station Load Balancer tests."""

import pytest

from src.domain import ItemRecord, Order, Priority, RECORD_FIELDS
from src.services import (
    RecordParser,
    OrderAggregator,
    StationAllocator,
    InMemoryOrderStore,
)


HEADER = ",".join(RECORD_FIELDS)


@pytest.fixture
def sample_export() -> str:
    """A small order export with a malformed line."""
    return "\n".join(
        [
            HEADER,
            "O1,I1,Widget,A,10,1.0,5x5,true,false,High,2",
            "O1,I2,Gadget,B,5,0.5,3x3,false,true,High,1",
            "O2,I3,Crate,C,40,8.0,50x50,false,false,Low,1",
            "",
            "O3,I4,Cable,D,3,0.1,10x2,false,false,Medium,5",
            "O4,I5,Broken",
            "O2,I6,Lid,C,4,0.9,50x50,true,true,Medium,1",
        ]
    )


@pytest.fixture
def sample_record() -> ItemRecord:
    """Create a sample item record for testing."""
    return ItemRecord(
        order_id="O1",
        item_id="I1",
        item_name="Widget",
        category="A",
        pack_time=10,
        weight=1.0,
        dimensions="5x5",
        vas=True,
        fragile=False,
        priority=Priority.HIGH.value,
        quantity=2,
    )


@pytest.fixture
def make_order():
    """Factory for pending orders with a given priority and estimated time."""

    def _make(order_id: str, priority: str = "Medium", estimated_time: int = 10) -> Order:
        return Order(id=order_id, priority=priority, estimated_time=estimated_time)

    return _make


@pytest.fixture
def parser() -> RecordParser:
    """Create a record parser for testing."""
    return RecordParser()


@pytest.fixture
def aggregator() -> OrderAggregator:
    """Create an order aggregator for testing."""
    return OrderAggregator()


@pytest.fixture
def allocator() -> StationAllocator:
    """Create a station allocator for testing."""
    return StationAllocator()


@pytest.fixture
def order_store() -> InMemoryOrderStore:
    """Create an in-memory order store for testing."""
    return InMemoryOrderStore()
