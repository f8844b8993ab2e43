"""
Item record domain models.

An item record is one flat row of the order export: a single item line of a
customer order, with its base handling time and handling flags.
"""

from enum import Enum

from pydantic import BaseModel, Field


# Positional layout of a data line in the order export
RECORD_FIELDS = (
    "orderID",
    "itemID",
    "itemName",
    "category",
    "packTime",
    "weight",
    "dimensions",
    "vas",
    "fragile",
    "priority",
    "quantity",
)
MIN_RECORD_FIELDS = len(RECORD_FIELDS)


class Priority(str, Enum):
    """
    Order priority.

    Priority drives both the time multiplier and the allocation order.
    Values outside this set are carried through as plain strings.
    """

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class ItemRecord(BaseModel):
    """A single item line belonging to an order."""

    order_id: str = Field(alias="orderID")
    item_id: str = Field(default="", alias="itemID")
    item_name: str = Field(default="", alias="itemName")
    category: str = ""
    pack_time: int = Field(default=0, alias="packTime")  # Base handling seconds per unit
    weight: float = 0.0
    dimensions: str = ""
    vas: bool = False  # Value-added service required
    fragile: bool = False
    priority: str = Priority.MEDIUM.value
    quantity: int = Field(default=1, ge=1)

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def pack_time_with_surcharges(self) -> int:
        """Handling time for all units of this line, surcharges included."""
        total = self.pack_time * self.quantity
        if self.vas:
            total += 2 * self.quantity
        if self.fragile:
            total += 1 * self.quantity
        return total


class ParseWarning(BaseModel):
    """A data line that was skipped while parsing an export."""

    line_number: int  # 1-based, header is line 1
    line: str
    reason: str

    model_config = {"frozen": True}
