"""Daily statistics endpoints."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..exceptions import PastDateError
from ..services.statistics import StatisticsController
from ..services.tally import DailyTally
from .deps import get_statistics_controller, get_tally

logger = logging.getLogger(__name__)

router = APIRouter()


class DayCounterResponse(BaseModel):
    date: str
    value: int
    formatted_date: str

    class Config:
        from_attributes = True


class TodayResponse(BaseModel):
    date: str
    counter: Optional[DayCounterResponse]
    point_counter: int
    last_added_date: str


class IncrementResponse(BaseModel):
    date: str
    persisted_value: int
    point_counter: int
    rolled_over: bool
    chart: Dict[str, Any]


@router.get("/today", response_model=TodayResponse)
async def get_today(tally: DailyTally = Depends(get_tally)):
    """Return today's stored counter (if any) and the in-memory tally."""
    today = tally.clock()
    counter = await tally.controller.get_data_by_date(today)
    return TodayResponse(
        date=today,
        counter=DayCounterResponse.model_validate(counter) if counter is not None else None,
        point_counter=tally.point_counter,
        last_added_date=tally.last_added_date,
    )


@router.post("/increment", response_model=IncrementResponse)
async def increment(tally: DailyTally = Depends(get_tally)):
    """Record one increment event for today and return the refreshed chart.

    The event date always comes from the server clock.
    """
    try:
        result = await tally.increment()
    except PastDateError as e:
        # Server clock moved back behind the day being counted
        raise HTTPException(status_code=409, detail=str(e))

    return IncrementResponse(
        date=result.date,
        persisted_value=result.persisted_value,
        point_counter=result.point_counter,
        rolled_over=result.rolled_over,
        chart=result.chart.to_dict(),
    )


@router.get("/chart")
async def get_chart(tally: DailyTally = Depends(get_tally)):
    """Return the chart render data for the stored series."""
    chart = await tally.render()
    return chart.to_dict()


@router.get("/series", response_model=List[DayCounterResponse])
async def get_series(controller: StatisticsController = Depends(get_statistics_controller)):
    """Return every stored counter, oldest first."""
    series, _ = await controller.get_series()
    return series


@router.get("/{day}", response_model=DayCounterResponse)
async def get_counter(
    day: str,
    controller: StatisticsController = Depends(get_statistics_controller),
):
    """Return the stored counter for one date."""
    counter = await controller.get_data_by_date(day)
    if counter is None:
        raise HTTPException(status_code=404, detail="No counter for this date")
    return counter
