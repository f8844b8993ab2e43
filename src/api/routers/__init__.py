"""API routers."""

from . import orders, balance

__all__ = ["orders", "balance"]
