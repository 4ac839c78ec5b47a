"""Parking and statistics API schemas."""

from __future__ import annotations

import datetime as dt
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from ..models.domain import DayOfWeek


class _FromDomain(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class AddressModel(_FromDomain):
    street_address: str
    geo_latitude: float
    geo_longitude: float


class ParkingModel(_FromDomain):
    parking_id: int
    free_spots: int
    total_spots: int
    name: str
    symbol: str
    opening_hours: Optional[dt.time] = None
    closing_hours: Optional[dt.time] = None
    is_opened: bool
    address: Optional[AddressModel] = None


class ParkingInfoModel(_FromDomain):
    parking_id: int
    total_spots: int


class ParkingStatsModel(_FromDomain):
    average_availability: float
    average_free_spots: int


class OccupancyInfoModel(_FromDomain):
    day_of_week: DayOfWeek
    time: dt.time


class ParkingStatsResponseModel(_FromDomain):
    parking_info: ParkingInfoModel
    stats: ParkingStatsModel


class DailyParkingStatsModel(_FromDomain):
    parking_info: ParkingInfoModel
    stats: ParkingStatsModel
    max_occupancy_at: dt.time
    min_occupancy_at: dt.time


class WeeklyParkingStatsModel(_FromDomain):
    parking_info: ParkingInfoModel
    stats: ParkingStatsModel
    max_occupancy_info: OccupancyInfoModel
    min_occupancy_info: OccupancyInfoModel


class CollectiveDailyParkingStatsModel(_FromDomain):
    parking_info: ParkingInfoModel
    stats_map: Dict[dt.time, ParkingStatsModel]


class CollectiveWeeklyParkingStatsModel(_FromDomain):
    parking_info: ParkingInfoModel
    stats_map: Dict[DayOfWeek, Dict[dt.time, ParkingStatsModel]]


class ErrorResponse(BaseModel):
    detail: str


def to_models(model: type[_FromDomain], items: List[object]) -> list:
    return [model.model_validate(item) for item in items]
