"""
Station Allocation Service.

Distributes orders across fulfillment stations so that per-station workload
is balanced. Uses greedy list scheduling in the style of Longest Processing
Time first: orders are taken by priority, then by estimated time (largest
first), and each goes to the station with the least work so far.

This is an approximation of minimum-makespan scheduling, not an exact
bin-packing solution.
"""

import heapq
import logging
from typing import Iterable

from src.domain import (
    Order,
    Station,
    StationStatus,
    AllocationResult,
)
from src.domain.station import OVERLOAD_RATIO, OPTIMAL_RATIO
from .aggregation import round_half_up
from .errors import InvalidStationCountError

logger = logging.getLogger(__name__)


class StationAllocator:
    """
    Greedy allocator of orders to stations.

    Station selection keeps a heap keyed by (total time, station id), so the
    least-loaded station is found in O(log N) and ties go to the lowest id.
    Ordering is stable, so identical inputs always produce identical
    assignments.

    Usage:
        allocator = StationAllocator()
        result = allocator.allocate(orders, station_count=4)
    """

    def allocate(self, orders: Iterable[Order], station_count: int) -> AllocationResult:
        """
        Assign every order to a station and score station load.

        Orders are annotated in place with their station id and Assigned
        status.

        Args:
            orders: Orders with priority and estimated time
            station_count: Number of stations (must be positive)

        Returns:
            AllocationResult with orders in assignment order and stations
            in id order

        Raises:
            InvalidStationCountError: If station_count is not positive
        """
        if isinstance(station_count, bool) or not isinstance(station_count, int) or station_count <= 0:
            raise InvalidStationCountError(station_count)

        stations = [Station.numbered(i) for i in range(1, station_count + 1)]
        sorted_orders = self.sort_orders(orders)

        heap = [(station.total_time, station.id) for station in stations]
        heapq.heapify(heap)

        for order in sorted_orders:
            _, station_id = heapq.heappop(heap)
            station = stations[station_id - 1]
            station.assign(order)
            heapq.heappush(heap, (station.total_time, station.id))

        self.score_stations(stations)

        logger.info(
            "Allocated %d orders across %d stations (makespan %d)",
            len(sorted_orders),
            station_count,
            max(s.total_time for s in stations),
        )
        return AllocationResult(orders=sorted_orders, stations=stations)

    @staticmethod
    def sort_orders(orders: Iterable[Order]) -> list[Order]:
        """Order by priority weight, then estimated time, both descending."""
        return sorted(orders, key=lambda o: (-o.priority_weight, -o.estimated_time))

    @staticmethod
    def score_stations(stations: list[Station]) -> None:
        """Compute load balance, efficiency and status for each station."""
        avg_time = sum(s.total_time for s in stations) / len(stations)
        max_time = max(s.total_time for s in stations) or 1

        for station in stations:
            if station.total_time == 0:
                station.load_balance = 0
                station.efficiency = 0
                station.status = StationStatus.IDLE
                continue

            deviation = abs(station.total_time - avg_time) / avg_time
            station.load_balance = round_half_up(100 - deviation * 100)
            station.efficiency = round_half_up(station.total_time / max_time * 100)

            ratio = station.total_time / avg_time
            if ratio > OVERLOAD_RATIO:
                station.status = StationStatus.OVERLOADED
            elif ratio > OPTIMAL_RATIO:
                station.status = StationStatus.OPTIMAL
            else:
                station.status = StationStatus.LIGHT_LOAD


def allocate_stations(orders: Iterable[Order], station_count: int) -> AllocationResult:
    """Allocate orders across `station_count` stations."""
    return StationAllocator().allocate(orders, station_count)
