"""
Order domain models.

An order is the unit of work handed to a fulfillment station. It is built by
grouping item records on their order id.
"""

from enum import Enum

from pydantic import BaseModel, Field

from .record import ItemRecord, Priority


class OrderStatus(str, Enum):
    """Order lifecycle status."""

    PENDING = "Pending"  # Aggregated, not yet placed on a station
    ASSIGNED = "Assigned"  # Placed on a station by the allocator


# Multiplier applied to the raw pack time; unknown priorities use 1.0
PRIORITY_TIME_MULTIPLIER: dict[str, float] = {
    Priority.HIGH.value: 0.8,
    Priority.LOW.value: 1.2,
}

# Allocation weight; unknown priorities sort after Low
PRIORITY_WEIGHT: dict[str, int] = {
    Priority.HIGH.value: 3,
    Priority.MEDIUM.value: 2,
    Priority.LOW.value: 1,
}


class Order(BaseModel):
    """
    Customer order made of one or more item records.

    `items` counts units (sum of quantities), not item lines.
    `priority` is taken from the first line seen for the order and never
    changes afterwards.
    """

    id: str
    items: int = 0
    item_details: list[ItemRecord] = Field(default_factory=list, alias="itemDetails")
    priority: str = Priority.MEDIUM.value
    total_pack_time: int = Field(default=0, alias="totalPackTime")
    has_vas: bool = Field(default=False, alias="hasVAS")
    has_fragile: bool = Field(default=False, alias="hasFragile")
    estimated_time: int = Field(default=0, alias="estimatedTime")
    station: int | None = None
    status: OrderStatus = OrderStatus.PENDING

    model_config = {"frozen": False, "populate_by_name": True}

    @property
    def time_multiplier(self) -> float:
        """Multiplier applied to the pack time for this order's priority."""
        return PRIORITY_TIME_MULTIPLIER.get(self.priority, 1.0)

    @property
    def priority_weight(self) -> int:
        """Allocation weight for this order's priority."""
        return PRIORITY_WEIGHT.get(self.priority, 0)


class AssignmentUpdate(BaseModel):
    """Station assignment for a stored order."""

    id: str
    station: int | None = None
    status: OrderStatus = OrderStatus.ASSIGNED

    model_config = {"frozen": True}
