"""Derived occupancy statistics returned by the aggregation engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from .domain import DayOfWeek


@dataclass(frozen=True, slots=True)
class OccupancyInfo:
    """One bucket of the weekly grid."""

    day_of_week: DayOfWeek
    time: time


@dataclass(frozen=True, slots=True)
class ParkingInfo:
    parking_id: int
    total_spots: int


@dataclass(frozen=True, slots=True)
class ParkingStats:
    average_availability: float
    average_free_spots: int


@dataclass(frozen=True, slots=True)
class ParkingStatsResponse:
    parking_info: ParkingInfo
    stats: ParkingStats


@dataclass(frozen=True, slots=True)
class DailyParkingStatsResponse:
    parking_info: ParkingInfo
    stats: ParkingStats
    max_occupancy_at: time
    min_occupancy_at: time


@dataclass(frozen=True, slots=True)
class WeeklyParkingStatsResponse:
    parking_info: ParkingInfo
    stats: ParkingStats
    max_occupancy_info: OccupancyInfo
    min_occupancy_info: OccupancyInfo


@dataclass(frozen=True, slots=True)
class CollectiveDailyParkingStats:
    parking_info: ParkingInfo
    stats_map: dict[time, ParkingStats]


@dataclass(frozen=True, slots=True)
class CollectiveWeeklyParkingStats:
    parking_info: ParkingInfo
    stats_map: dict[DayOfWeek, dict[time, ParkingStats]]
