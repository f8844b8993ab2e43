"""
Order export loading.

Reads the order export from disk and runs it through aggregation.
"""

import logging
from pathlib import Path

from src.domain import Order
from .aggregation import aggregate_orders
from .errors import RecordSourceError

logger = logging.getLogger(__name__)


def load_record_text(path: Path | str) -> str:
    """
    Read an order export file.

    Raises:
        RecordSourceError: If the file cannot be read or decoded
    """
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RecordSourceError(f"Failed to read order export {path}: {e}") from e


def load_orders(path: Path | str, limit: int | None = None) -> list[Order]:
    """
    Load and aggregate orders from an export file.

    Args:
        path: Export file path
        limit: Maximum number of orders to return (None for all)
    """
    orders = aggregate_orders(load_record_text(path))
    logger.debug("Loaded %d orders from %s", len(orders), path)
    if limit is not None:
        return orders[:max(limit, 0)]
    return orders
