"""
Repository pattern for database access.

Provides clean abstraction over SQLAlchemy queries with async support.
"""

import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from .models import CustomerOrderRecord
from src.domain import Order, OrderStatus, AssignmentUpdate

logger = logging.getLogger(__name__)


class CustomerOrderRepository:
    """
    Repository for customer orders.

    Implements both the OrderStore and AssignmentStore interfaces.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_order_id(self, order_id: str) -> Optional[CustomerOrderRecord]:
        """Get the record for an order id."""
        result = await self.session.execute(
            select(CustomerOrderRecord).where(CustomerOrderRecord.order_id == order_id)
        )
        return result.scalar_one_or_none()

    async def save_order(self, order: Order) -> str:
        """Save an order from the domain model, replacing any with the same id."""
        payload = order.model_dump(mode="json", by_alias=True)
        record = await self.get_by_order_id(order.id)

        if record is None:
            record = CustomerOrderRecord(order_id=order.id)
            self.session.add(record)

        record.priority = order.priority
        record.items = order.items
        record.estimated_time = order.estimated_time
        record.station = order.station
        record.status = order.status.value
        record.payload = payload

        await self.session.flush()
        return order.id

    async def get_all_orders(self) -> list[Order]:
        """Get all saved orders in save order."""
        result = await self.session.execute(
            select(CustomerOrderRecord).order_by(CustomerOrderRecord.id)
        )
        return [self._to_domain(record) for record in result.scalars().all()]

    async def update_assignments(self, updates: list[AssignmentUpdate]) -> bool:
        """Set station and status on saved orders; unknown ids are skipped."""
        updated = 0
        for assignment in updates:
            result = await self.session.execute(
                update(CustomerOrderRecord)
                .where(CustomerOrderRecord.order_id == assignment.id)
                .values(station=assignment.station, status=assignment.status.value)
            )
            updated += result.rowcount

        await self.session.flush()
        logger.debug("Updated assignments for %d of %d orders", updated, len(updates))
        return True

    @staticmethod
    def _to_domain(record: CustomerOrderRecord) -> Order:
        order = Order.model_validate(record.payload)
        order.station = record.station
        order.status = OrderStatus(record.status)
        return order
