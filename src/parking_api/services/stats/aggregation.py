"""Occupancy statistics over the weekly availability grid.

Every function works on a single ``ParkingData`` record and returns ``None``
when the record holds no bucket relevant to the query, so callers can skip the
facility instead of reporting zeros.
"""

from __future__ import annotations

from datetime import time
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal
from typing import Iterable, Iterator, Optional, Sequence

from ...models.domain import AvailabilityData, DayOfWeek, ParkingData
from ...models.stats import (
    CollectiveDailyParkingStats,
    CollectiveWeeklyParkingStats,
    DailyParkingStatsResponse,
    OccupancyInfo,
    ParkingInfo,
    ParkingStats,
    ParkingStatsResponse,
    WeeklyParkingStatsResponse,
)

AVAILABILITY_PRECISION = Decimal("0.001")


def build_stats(availabilities: Sequence[float], total_spots: int) -> Optional[ParkingStats]:
    """Average bucket availabilities into rounded stats.

    Each bucket counts once regardless of how many observations built it.
    Availability is rounded half-up to three decimals; free spots are the
    truncated product of the unrounded mean and the total spot count.
    """
    if not availabilities:
        return None
    # summed as decimals: 0.8 + 0.6 must average to 0.7, not 0.6999...
    total = sum((Decimal(str(value)) for value in availabilities), Decimal(0))
    mean = total / len(availabilities)
    average_availability = float(mean.quantize(AVAILABILITY_PRECISION, rounding=ROUND_HALF_UP))
    average_free_spots = int((total * total_spots / len(availabilities)).to_integral_value(rounding=ROUND_DOWN))
    return ParkingStats(average_availability=average_availability, average_free_spots=average_free_spots)


def parking_info(data: ParkingData) -> ParkingInfo:
    return ParkingInfo(parking_id=data.parking_id, total_spots=data.total_spots)


def iter_week(data: ParkingData) -> Iterator[tuple[OccupancyInfo, AvailabilityData]]:
    """Yield every bucket in chronological order, Monday first."""
    for day in DayOfWeek:
        for bucket_time, sample in sorted(data.free_spots_history.get(day, {}).items()):
            yield OccupancyInfo(day_of_week=day, time=bucket_time), sample


def _extremes(buckets: Iterable[tuple[OccupancyInfo, AvailabilityData]]) -> tuple[OccupancyInfo, OccupancyInfo]:
    """Return (lowest availability, highest availability) buckets; earliest wins ties."""
    lowest: Optional[tuple[OccupancyInfo, float]] = None
    highest: Optional[tuple[OccupancyInfo, float]] = None
    for info, sample in buckets:
        value = sample.average_availability
        if lowest is None or value < lowest[1]:
            lowest = (info, value)
        if highest is None or value > highest[1]:
            highest = (info, value)
    if lowest is None or highest is None:
        raise ValueError("Cannot pick extremes from an empty bucket set")
    return lowest[0], highest[0]


def point_stats(data: ParkingData, day_of_week: Optional[DayOfWeek], at: time) -> Optional[ParkingStatsResponse]:
    """Stats for one bucket, or for the same clock time averaged across the week."""
    if day_of_week is not None:
        sample = data.free_spots_history.get(day_of_week, {}).get(at)
        availabilities = [sample.average_availability] if sample else []
    else:
        availabilities = []
        for day in DayOfWeek:
            sample = data.free_spots_history.get(day, {}).get(at)
            if sample is not None:
                availabilities.append(sample.average_availability)
    stats = build_stats(availabilities, data.total_spots)
    if stats is None:
        return None
    return ParkingStatsResponse(parking_info=parking_info(data), stats=stats)


def daily_stats(data: ParkingData, day_of_week: DayOfWeek) -> Optional[DailyParkingStatsResponse]:
    buckets = [(info, sample) for info, sample in iter_week(data) if info.day_of_week == day_of_week]
    stats = build_stats([sample.average_availability for _, sample in buckets], data.total_spots)
    if stats is None:
        return None
    max_occupancy, min_occupancy = _extremes(buckets)
    return DailyParkingStatsResponse(
        parking_info=parking_info(data),
        stats=stats,
        max_occupancy_at=max_occupancy.time,
        min_occupancy_at=min_occupancy.time,
    )


def weekly_stats(data: ParkingData) -> Optional[WeeklyParkingStatsResponse]:
    buckets = list(iter_week(data))
    stats = build_stats([sample.average_availability for _, sample in buckets], data.total_spots)
    if stats is None:
        return None
    max_occupancy, min_occupancy = _extremes(buckets)
    return WeeklyParkingStatsResponse(
        parking_info=parking_info(data),
        stats=stats,
        max_occupancy_info=max_occupancy,
        min_occupancy_info=min_occupancy,
    )


def _bucket_stats(buckets: dict[time, AvailabilityData], total_spots: int) -> dict[time, ParkingStats]:
    result: dict[time, ParkingStats] = {}
    for bucket_time, sample in sorted(buckets.items()):
        stats = build_stats([sample.average_availability], total_spots)
        if stats is not None:
            result[bucket_time] = stats
    return result


def collective_daily_stats(data: ParkingData, day_of_week: DayOfWeek) -> Optional[CollectiveDailyParkingStats]:
    stats_map = _bucket_stats(data.free_spots_history.get(day_of_week, {}), data.total_spots)
    if not stats_map:
        return None
    return CollectiveDailyParkingStats(parking_info=parking_info(data), stats_map=stats_map)


def collective_weekly_stats(data: ParkingData) -> Optional[CollectiveWeeklyParkingStats]:
    stats_map: dict[DayOfWeek, dict[time, ParkingStats]] = {}
    for day in DayOfWeek:
        day_map = _bucket_stats(data.free_spots_history.get(day, {}), data.total_spots)
        if day_map:
            stats_map[day] = day_map
    if not stats_map:
        return None
    return CollectiveWeeklyParkingStats(parking_info=parking_info(data), stats_map=stats_map)
