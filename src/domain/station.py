"""
Fulfillment station domain models.

A station is a packing position that works through the orders assigned to it.
Stations are created fresh for every allocation and never persisted.
"""

from enum import Enum

from pydantic import BaseModel, Field, computed_field

from .order import Order, OrderStatus


class StationStatus(str, Enum):
    """
    Station load classification.

    Derived from the ratio of a station's total time to the average
    station time of the same allocation.
    """

    IDLE = "Idle"  # No orders assigned
    ACTIVE = "Active"  # Receiving orders, metrics not yet computed
    OVERLOADED = "Overloaded"  # More than 120% of average
    OPTIMAL = "Optimal"  # Between 80% and 120% of average
    LIGHT_LOAD = "Light Load"  # 80% of average or less


# Load ratio thresholds (station time / average station time)
OVERLOAD_RATIO = 1.2
OPTIMAL_RATIO = 0.8


class Station(BaseModel):
    """
    Fulfillment station with its assigned orders and load metrics.

    `load_balance` is 100 when the station sits exactly on the average load
    and drops by the percentage deviation; it is not clamped and goes
    negative when the deviation exceeds the average itself.
    """

    id: int = Field(ge=1)
    name: str
    orders: list[Order] = Field(default_factory=list)
    total_time: int = Field(default=0, alias="totalTime")
    status: StationStatus = StationStatus.IDLE
    load_balance: int = Field(default=0, alias="loadBalance")
    efficiency: int = 0

    model_config = {"frozen": False, "populate_by_name": True}

    @classmethod
    def numbered(cls, station_id: int) -> "Station":
        """Create an empty station with its display name."""
        return cls(id=station_id, name=f"Station {station_id}")

    @computed_field(alias="orderCount")
    @property
    def order_count(self) -> int:
        """Number of orders assigned to the station."""
        return len(self.orders)

    def assign(self, order: Order) -> None:
        """Place an order on this station and mark it assigned."""
        order.station = self.id
        order.status = OrderStatus.ASSIGNED
        self.orders.append(order)
        self.total_time += order.estimated_time
        self.status = StationStatus.ACTIVE


class AllocationResult(BaseModel):
    """Orders annotated with their stations, plus per-station summaries."""

    orders: list[Order]
    stations: list[Station]

    @computed_field
    @property
    def makespan(self) -> int:
        """Largest total time across stations."""
        return max((s.total_time for s in self.stations), default=0)
