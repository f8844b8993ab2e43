"""Errors raised by the order pipeline and its record source."""


class StationBalancerError(Exception):
    """Base class for pipeline errors."""


class ParseError(StationBalancerError, ValueError):
    """Record input is absent or not text at all."""


class InvalidStationCountError(StationBalancerError, ValueError):
    """Allocation was requested for a non-positive number of stations."""

    def __init__(self, station_count: int):
        self.station_count = station_count
        super().__init__(f"Station count must be a positive integer, got {station_count}")


class RecordSourceError(StationBalancerError):
    """The order export could not be read."""
