"""Occupancy statistics endpoints."""

from __future__ import annotations

import datetime as dt
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ...models.domain import DayOfWeek
from ...schemas.parking import (
    CollectiveDailyParkingStatsModel,
    CollectiveWeeklyParkingStatsModel,
    DailyParkingStatsModel,
    ParkingStatsResponseModel,
    WeeklyParkingStatsModel,
    to_models,
)
from ...services.parking import ParkingService
from ..dependencies import get_parking_service
from .parkings import NOT_FOUND, unwrap

router = APIRouter(prefix="/parkings", tags=["stats"])


def _single(model, payload: object):
    return None if payload is None else model.model_validate(payload)


@router.get("/stats", response_model=List[ParkingStatsResponseModel], status_code=status.HTTP_200_OK)
def get_parking_stats(
    at: dt.time = Query(..., alias="time"),
    day_of_week: Optional[DayOfWeek] = Query(default=None),
    parking_ids: Optional[List[int]] = Query(default=None, alias="ids"),
    service: ParkingService = Depends(get_parking_service),
) -> List[ParkingStatsResponseModel]:
    return to_models(ParkingStatsResponseModel, service.get_parking_stats(parking_ids, day_of_week, at))


@router.get("/stats/daily", response_model=List[DailyParkingStatsModel], status_code=status.HTTP_200_OK)
def get_daily_parking_stats(
    day_of_week: DayOfWeek = Query(...),
    parking_ids: Optional[List[int]] = Query(default=None, alias="ids"),
    service: ParkingService = Depends(get_parking_service),
) -> List[DailyParkingStatsModel]:
    return to_models(DailyParkingStatsModel, service.get_daily_parking_stats(parking_ids, day_of_week))


@router.get("/stats/weekly", response_model=List[WeeklyParkingStatsModel], status_code=status.HTTP_200_OK)
def get_weekly_parking_stats(
    parking_ids: Optional[List[int]] = Query(default=None, alias="ids"),
    service: ParkingService = Depends(get_parking_service),
) -> List[WeeklyParkingStatsModel]:
    return to_models(WeeklyParkingStatsModel, service.get_weekly_parking_stats(parking_ids))


@router.get(
    "/stats/daily/collective",
    response_model=List[CollectiveDailyParkingStatsModel],
    status_code=status.HTTP_200_OK,
)
def get_collective_daily_parking_stats(
    day_of_week: DayOfWeek = Query(...),
    parking_ids: Optional[List[int]] = Query(default=None, alias="ids"),
    service: ParkingService = Depends(get_parking_service),
) -> List[CollectiveDailyParkingStatsModel]:
    stats = service.get_collective_daily_parking_stats(parking_ids, day_of_week)
    return to_models(CollectiveDailyParkingStatsModel, stats)


@router.get(
    "/stats/weekly/collective",
    response_model=List[CollectiveWeeklyParkingStatsModel],
    status_code=status.HTTP_200_OK,
)
def get_collective_weekly_parking_stats(
    parking_ids: Optional[List[int]] = Query(default=None, alias="ids"),
    service: ParkingService = Depends(get_parking_service),
) -> List[CollectiveWeeklyParkingStatsModel]:
    return to_models(CollectiveWeeklyParkingStatsModel, service.get_collective_weekly_parking_stats(parking_ids))


@router.get("/{parking_id:int}/stats", response_model=Optional[ParkingStatsResponseModel], responses=NOT_FOUND)
def get_parking_stats_for_parking(
    parking_id: int,
    at: dt.time = Query(..., alias="time"),
    day_of_week: Optional[DayOfWeek] = Query(default=None),
    service: ParkingService = Depends(get_parking_service),
) -> Optional[ParkingStatsResponseModel]:
    result = service.get_parking_stats_for_parking(parking_id, day_of_week, at)
    return _single(ParkingStatsResponseModel, unwrap(result))


@router.get("/{parking_id:int}/stats/daily", response_model=Optional[DailyParkingStatsModel], responses=NOT_FOUND)
def get_daily_parking_stats_for_parking(
    parking_id: int,
    day_of_week: DayOfWeek = Query(...),
    service: ParkingService = Depends(get_parking_service),
) -> Optional[DailyParkingStatsModel]:
    result = service.get_daily_parking_stats_for_parking(parking_id, day_of_week)
    return _single(DailyParkingStatsModel, unwrap(result))


@router.get("/{parking_id:int}/stats/weekly", response_model=Optional[WeeklyParkingStatsModel], responses=NOT_FOUND)
def get_weekly_parking_stats_for_parking(
    parking_id: int,
    service: ParkingService = Depends(get_parking_service),
) -> Optional[WeeklyParkingStatsModel]:
    return _single(WeeklyParkingStatsModel, unwrap(service.get_weekly_parking_stats_for_parking(parking_id)))


@router.get(
    "/{parking_id:int}/stats/daily/collective",
    response_model=Optional[CollectiveDailyParkingStatsModel],
    responses=NOT_FOUND,
)
def get_collective_daily_parking_stats_for_parking(
    parking_id: int,
    day_of_week: DayOfWeek = Query(...),
    service: ParkingService = Depends(get_parking_service),
) -> Optional[CollectiveDailyParkingStatsModel]:
    result = service.get_collective_daily_parking_stats_for_parking(parking_id, day_of_week)
    return _single(CollectiveDailyParkingStatsModel, unwrap(result))


@router.get(
    "/{parking_id:int}/stats/weekly/collective",
    response_model=Optional[CollectiveWeeklyParkingStatsModel],
    responses=NOT_FOUND,
)
def get_collective_weekly_parking_stats_for_parking(
    parking_id: int,
    service: ParkingService = Depends(get_parking_service),
) -> Optional[CollectiveWeeklyParkingStatsModel]:
    result = service.get_collective_weekly_parking_stats_for_parking(parking_id)
    return _single(CollectiveWeeklyParkingStatsModel, unwrap(result))
