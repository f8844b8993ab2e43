"""
Order Aggregation Service.

Groups item records into orders and estimates the packing time of each order.

Estimated time is the sum of per-line pack times (base time per unit plus a
2s/unit value-added-service surcharge and a 1s/unit fragile surcharge),
scaled by a priority multiplier: High 0.8, Low 1.2, anything else 1.0.
"""

import logging
import math
from typing import Iterable

from src.domain import ItemRecord, Order, OrderStatus
from .errors import ParseError
from .parsing import RecordParser

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


class OrderAggregator:
    """
    Builds orders from a stream of item records.

    Orders come out in the order their ids were first seen. An order's
    priority is fixed by its first record; later records with a different
    priority do not change it.

    Usage:
        aggregator = OrderAggregator()
        orders = aggregator.aggregate(records)
    """

    def aggregate(self, records: Iterable[ItemRecord]) -> list[Order]:
        """
        Group records by order id and compute per-order timing.

        Args:
            records: Item records, in export order

        Returns:
            Pending orders with estimated times
        """
        order_map: dict[str, Order] = {}

        for record in records:
            order = order_map.get(record.order_id)
            if order is None:
                order = Order(id=record.order_id, priority=record.priority)
                order_map[record.order_id] = order
            self._add_record(order, record)

        orders = list(order_map.values())
        for order in orders:
            order.estimated_time = self.estimate_time(order)
            order.station = None
            order.status = OrderStatus.PENDING

        logger.debug("Aggregated %d orders", len(orders))
        return orders

    @staticmethod
    def _add_record(order: Order, record: ItemRecord) -> None:
        order.item_details.append(record)
        order.items += record.quantity
        order.total_pack_time += record.pack_time_with_surcharges
        if record.vas:
            order.has_vas = True
        if record.fragile:
            order.has_fragile = True

    @staticmethod
    def estimate_time(order: Order) -> int:
        """Estimated packing time of an order after its priority multiplier."""
        return round_half_up(order.total_pack_time * order.time_multiplier)


def aggregate_orders(raw_record_text: str | bytes) -> list[Order]:
    """
    Parse an order export and aggregate it into orders.

    Malformed lines are skipped and logged.

    Raises:
        ParseError: If the input is absent or cannot be decoded as text
    """
    if isinstance(raw_record_text, bytes):
        try:
            raw_record_text = raw_record_text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"Record text is not valid UTF-8: {e}") from e

    parser = RecordParser()
    orders = OrderAggregator().aggregate(parser.parse(raw_record_text))

    if parser.warnings:
        logger.info(
            "Aggregated %d orders, skipped %d malformed lines",
            len(orders),
            len(parser.warnings),
        )
    return orders
