"""
API dependencies.

Provides dependency injection for FastAPI routes.
"""

from typing import AsyncGenerator

from src.config import Settings, get_settings
from src.database import CustomerOrderRepository, get_session
from src.services import StationAllocator


class AppState:
    """Application state container."""

    _instance: "AppState | None" = None

    def __init__(self):
        self.settings = get_settings()
        self.allocator = StationAllocator()

    @classmethod
    def get_instance(cls) -> "AppState":
        """Get or create singleton instance."""
        if cls._instance is None:
            cls._instance = AppState()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset singleton (for testing)."""
        cls._instance = None


def get_app_settings() -> Settings:
    """Dependency for runtime settings."""
    return AppState.get_instance().settings


def get_allocator() -> StationAllocator:
    """Dependency for the station allocator."""
    return AppState.get_instance().allocator


async def get_order_store() -> AsyncGenerator[CustomerOrderRepository, None]:
    """Dependency for the order and assignment store, one session per request."""
    async with get_session() as session:
        yield CustomerOrderRepository(session)
