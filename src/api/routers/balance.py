"""
Load balancing API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel, Field

from src.domain import Order, AllocationResult
from src.services import StationAllocator, InvalidStationCountError
from src.api.dependencies import get_allocator

router = APIRouter()


class BalanceRequest(BaseModel):
    """Orders to distribute and the number of stations to use."""

    orders: list[Order] = Field(default_factory=list)
    station_count: int = Field(alias="stationCount")

    model_config = {"populate_by_name": True}


@router.post("/balance", response_model=AllocationResult)
async def balance_stations(
    request: BalanceRequest,
    allocator: Annotated[StationAllocator, Depends(get_allocator)],
):
    """
    Distribute orders across stations.

    Returns the orders in assignment order, each with its station, and one
    summary per station with load balance and efficiency scores.
    """
    try:
        return allocator.allocate(request.orders, request.station_count)
    except InvalidStationCountError as e:
        raise HTTPException(status_code=400, detail=str(e))
