"""
FastAPI application for the Station Load Balancer.

Provides REST endpoints for:
- Order aggregation from the order export
- Station load balancing
- Customer order storage and station assignment updates
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
