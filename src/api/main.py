"""
FastAPI main application.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI

from src.config import configure_logging
from src.database import init_db, close_db
from .routers import orders, balance

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(application: FastAPI):
    """Create tables on startup and release connections on shutdown."""
    await init_db()
    yield
    await close_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging()

    application = FastAPI(
        title="Station Load Balancer API",
        description="""
        Warehouse order aggregation and fulfillment station load balancing.

        ## Features

        - **Orders**: Aggregate the item-level order export into timed orders
        - **Balancing**: Distribute orders across stations with balanced load
        - **Customer orders**: Store orders and their station assignments
        """,
        version=API_VERSION,
        lifespan=lifespan,
    )

    application.include_router(orders.router, prefix="/api", tags=["Orders"])
    application.include_router(balance.router, prefix="/api", tags=["Balancing"])

    @application.get("/", tags=["Health"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Station Load Balancer API",
            "version": API_VERSION,
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @application.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "services": {
                "aggregation": "available",
                "balancing": "available",
                "order_store": "available",
            },
        }

    return application


# Create default app instance
app = create_app()
