"""
Order Export Parser.

Turns the flat comma-delimited order export into typed item records.
The export has a header line followed by one line per item:

    orderID,itemID,itemName,category,packTime,weight,dimensions,vas,fragile,priority,quantity

The format has no quoting or escaping. Malformed lines are skipped with a
warning so one bad row never aborts a batch.
"""

import logging
import re
from typing import Callable, Iterator

from src.domain import ItemRecord, ParseWarning, MIN_RECORD_FIELDS
from .errors import ParseError

logger = logging.getLogger(__name__)

DELIMITER = ","

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_leading_int(value: str) -> int | None:
    """Parse the integer prefix of a field ("12", "12.5" and "12kg" all give 12)."""
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def parse_leading_float(value: str) -> float | None:
    """Parse the decimal prefix of a field."""
    match = _LEADING_FLOAT.match(value)
    return float(match.group(1)) if match else None


class RecordParser:
    """
    Streaming parser for the order export.

    Records are produced lazily; skipped lines are collected in `warnings`
    as the stream is consumed. Each call to `parse` starts a fresh list.

    Usage:
        parser = RecordParser()
        for record in parser.parse(text):
            ...
        print(parser.warnings)
    """

    def __init__(self, on_warning: Callable[[ParseWarning], None] | None = None):
        self.on_warning = on_warning
        self.warnings: list[ParseWarning] = []

    def parse(self, text: str) -> Iterator[ItemRecord]:
        """
        Parse an export into item records.

        Args:
            text: Full export contents, header line included

        Returns:
            Lazy, single-pass iterator of item records

        Raises:
            ParseError: If there is no text to parse
        """
        if text is None:
            raise ParseError("No record text to parse")
        if not isinstance(text, str):
            raise ParseError(f"Record text must be str, got {type(text).__name__}")

        self.warnings = []
        return self._iter_records(text)

    def _iter_records(self, text: str) -> Iterator[ItemRecord]:
        # Rows end at \n only; a trailing \r from CRLF exports is dropped
        lines = [line.rstrip("\r") for line in text.split("\n")]

        # Line 1 is the header
        for line_number, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue

            values = line.split(DELIMITER)
            if len(values) < MIN_RECORD_FIELDS:
                self._warn(
                    line_number,
                    line,
                    f"expected {MIN_RECORD_FIELDS} fields, found {len(values)}",
                )
                continue

            yield self.parse_values(values)

    @staticmethod
    def parse_values(values: list[str]) -> ItemRecord:
        """Build an item record from the split fields of one line."""
        pack_time = parse_leading_int(values[4])
        weight = parse_leading_float(values[5])
        quantity = parse_leading_int(values[10])

        return ItemRecord(
            order_id=values[0],
            item_id=values[1],
            item_name=values[2],
            category=values[3],
            pack_time=pack_time if pack_time is not None else 0,
            weight=weight if weight is not None else 0.0,
            dimensions=values[6],
            vas=values[7] == "true",
            fragile=values[8] == "true",
            priority=values[9],
            quantity=quantity if quantity is not None and quantity > 0 else 1,
        )

    def _warn(self, line_number: int, line: str, reason: str) -> None:
        warning = ParseWarning(line_number=line_number, line=line, reason=reason)
        self.warnings.append(warning)
        logger.warning("Skipping line %d of order export: %s", line_number, reason)
        if self.on_warning is not None:
            self.on_warning(warning)


def parse_records(text: str) -> Iterator[ItemRecord]:
    """Parse an export, logging and skipping malformed lines."""
    return RecordParser().parse(text)
