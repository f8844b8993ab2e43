"""
Order storage interfaces.

The pipeline never persists anything itself; the API layer saves customer
orders and station assignments through these interfaces.
"""

from typing import Protocol

from src.domain import Order, AssignmentUpdate


class OrderStore(Protocol):
    """Protocol for customer order storage."""

    async def save_order(self, order: Order) -> str:
        """Save an order, returning its id."""
        ...

    async def get_all_orders(self) -> list[Order]:
        """Get all saved orders in save order."""
        ...


class AssignmentStore(Protocol):
    """Protocol for persisting allocator output."""

    async def update_assignments(self, updates: list[AssignmentUpdate]) -> bool:
        """Apply station assignments to saved orders; unknown ids are ignored."""
        ...


class InMemoryOrderStore:
    """In-memory implementation for development/testing."""

    def __init__(self):
        self._orders: dict[str, Order] = {}

    async def save_order(self, order: Order) -> str:
        self._orders[order.id] = order.model_copy(deep=True)
        return order.id

    async def get_all_orders(self) -> list[Order]:
        return [order.model_copy(deep=True) for order in self._orders.values()]

    async def update_assignments(self, updates: list[AssignmentUpdate]) -> bool:
        for update in updates:
            order = self._orders.get(update.id)
            if order is None:
                continue
            order.station = update.station
            order.status = update.status
        return True
