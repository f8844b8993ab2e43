"""
Orders API endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Query, HTTPException, Depends
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError

from src.config import Settings
from src.domain import Order, AssignmentUpdate
from src.services import load_orders, RecordSourceError, ParseError
from src.services.store import OrderStore, AssignmentStore
from src.api.dependencies import get_app_settings, get_order_store

logger = logging.getLogger(__name__)

router = APIRouter()


class SaveOrderResponse(BaseModel):
    """Result of saving a customer order."""

    success: bool = True
    order_id: str = Field(alias="orderId")

    model_config = {"populate_by_name": True}


class UpdateResponse(BaseModel):
    """Result of an assignment update."""

    success: bool


@router.get("/orders", response_model=list[Order])
async def list_export_orders(
    settings: Annotated[Settings, Depends(get_app_settings)],
    limit: int | None = Query(default=None),
):
    """
    Aggregate the order export into orders.

    Returns at most `limit` orders (non-positive or missing uses the
    configured default), in first-seen order.
    """
    if limit is None or limit <= 0:
        limit = settings.default_order_limit

    try:
        return load_orders(settings.orders_csv_path, limit=limit)
    except (RecordSourceError, ParseError):
        logger.exception("Error reading order export %s", settings.orders_csv_path)
        raise HTTPException(status_code=500, detail="Failed to read orders")


@router.post("/orders", response_model=SaveOrderResponse)
async def save_customer_order(
    order: Order,
    store: Annotated[OrderStore, Depends(get_order_store)],
):
    """Save a customer order."""
    try:
        order_id = await store.save_order(order)
    except SQLAlchemyError:
        logger.exception("Error saving order %s", order.id)
        raise HTTPException(status_code=500, detail="Failed to save order")

    return SaveOrderResponse(order_id=order_id)


@router.get("/customer-orders", response_model=list[Order])
async def list_customer_orders(
    store: Annotated[OrderStore, Depends(get_order_store)],
):
    """List all saved customer orders."""
    try:
        return await store.get_all_orders()
    except SQLAlchemyError:
        logger.exception("Error loading customer orders")
        raise HTTPException(status_code=500, detail="Failed to load orders")


@router.post("/update-orders", response_model=UpdateResponse)
async def update_order_assignments(
    updates: list[AssignmentUpdate],
    store: Annotated[AssignmentStore, Depends(get_order_store)],
):
    """
    Apply station assignments to saved orders.

    Orders not in the store are ignored.
    """
    try:
        success = await store.update_assignments(updates)
    except SQLAlchemyError:
        logger.exception("Error updating %d order assignments", len(updates))
        raise HTTPException(status_code=500, detail="Failed to update orders")

    return UpdateResponse(success=success)
