"""
Application configuration.

Settings are read from environment variables with sensible defaults for
local development. The database URL is resolved separately in
`src.database.session`.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the API and demo."""

    data_dir: Path
    orders_csv_path: Path
    default_order_limit: int = 50
    default_station_count: int = 4
    log_level: str = "INFO"


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def get_settings() -> Settings:
    """
    Build settings from the environment.

    Supports:
    - DATA_DIR: directory holding the order export (default ./data)
    - ORDERS_CSV_PATH: order export file (default DATA_DIR/orders-new.csv)
    - DEFAULT_ORDER_LIMIT: orders returned by the orders endpoint
    - DEFAULT_STATION_COUNT: stations used by the demo
    - LOG_LEVEL: root logging level
    """
    data_dir = Path(os.getenv("DATA_DIR", "./data"))
    csv_path = os.getenv("ORDERS_CSV_PATH")

    return Settings(
        data_dir=data_dir,
        orders_csv_path=Path(csv_path) if csv_path else data_dir / "orders-new.csv",
        default_order_limit=_int_env("DEFAULT_ORDER_LIMIT", 50),
        default_station_count=_int_env("DEFAULT_STATION_COUNT", 4),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once at process entry."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
