"""Parking lookup, nearest-parking search and occupancy statistics."""

from __future__ import annotations

import logging
from datetime import date, time
from typing import Callable, Optional, Sequence, TypeVar

from ...data.parking_data_repository import ParkingDataRepository
from ...models.domain import DayOfWeek, ParkingData, ParkingResponse
from ...models.errors import (
    NoFreeParkingSpotsAvailable,
    ParkingError,
    ParkingNotFoundByAddress,
    ParkingNotFoundById,
    ParkingNotFoundByName,
    ParkingNotFoundBySymbol,
    Result,
)
from ...models.stats import (
    CollectiveDailyParkingStats,
    CollectiveWeeklyParkingStats,
    DailyParkingStatsResponse,
    ParkingStatsResponse,
    WeeklyParkingStatsResponse,
)
from ..geospatial import find_closest
from ..stats import aggregation
from ..stats.timeframe import resolve_timeframe
from .filters import ParkingFilter
from .sources import FacilitySource, Geocoder

logger = logging.getLogger(__name__)

S = TypeVar("S")


class ParkingService:
    def __init__(
        self,
        source: FacilitySource,
        geocoder: Geocoder,
        data_repository: ParkingDataRepository,
        interval_minutes: int,
    ) -> None:
        if interval_minutes <= 0:
            raise ValueError("Stats interval must be a positive number of minutes.")
        self.source = source
        self.geocoder = geocoder
        self.data_repository = data_repository
        self.interval_minutes = interval_minutes

    # live lookups

    def get_by_params(
        self,
        symbol: Optional[str] = None,
        parking_id: Optional[int] = None,
        name: Optional[str] = None,
        opened: Optional[bool] = None,
        has_free_spots: Optional[bool] = None,
    ) -> list[ParkingResponse]:
        parking_filter = ParkingFilter(
            symbol=symbol,
            parking_id=parking_id,
            name=name,
            is_opened=opened,
            has_free_spots=has_free_spots,
        )
        return parking_filter.apply(self.source.fetch_data())

    def get_by_name(self, name: str, opened: Optional[bool] = None) -> Result[ParkingResponse]:
        return self._find_first(ParkingFilter(name=name, is_opened=opened), ParkingNotFoundByName(name))

    def get_by_id(self, parking_id: int, opened: Optional[bool] = None) -> Result[ParkingResponse]:
        return self._find_first(ParkingFilter(parking_id=parking_id, is_opened=opened), ParkingNotFoundById(parking_id))

    def get_by_symbol(self, symbol: str, opened: Optional[bool] = None) -> Result[ParkingResponse]:
        return self._find_first(ParkingFilter(symbol=symbol, is_opened=opened), ParkingNotFoundBySymbol(symbol))

    def get_all_with_free_spots(self, opened: Optional[bool] = None) -> list[ParkingResponse]:
        return self.get_by_params(opened=opened, has_free_spots=True)

    def get_with_the_most_free_spots(self, opened: Optional[bool] = None) -> Result[ParkingResponse]:
        candidates = self.get_all_with_free_spots(opened)
        if not candidates:
            return Result.failure(NoFreeParkingSpotsAvailable(opened))
        best = candidates[0]
        for parking in candidates[1:]:
            if parking.free_spots > best.free_spots:
                best = parking
        return self._found(best)

    def get_closest_parking(self, address: str) -> Result[ParkingResponse]:
        locations = self.geocoder.search(address)
        if not locations:
            logger.info("Address '%s' could not be geocoded", address)
            return Result.failure(ParkingNotFoundByAddress(address))
        closest = find_closest(locations[0], self.source.fetch_data())
        if closest is None:
            return Result.failure(ParkingNotFoundByAddress(address))
        return self._found(closest)

    def _find_first(self, parking_filter: ParkingFilter, error: ParkingError) -> Result[ParkingResponse]:
        matches = parking_filter.apply(self.source.fetch_data())
        if not matches:
            return Result.failure(error)
        return self._found(matches[0])

    def _found(self, parking: ParkingResponse) -> Result[ParkingResponse]:
        logger.info("Parking found: %s (%s)", parking.name, parking.parking_id)
        return Result.success(parking)

    # occupancy statistics

    def get_parking_stats(
        self,
        parking_ids: Optional[Sequence[int]],
        day_of_week: Optional[DayOfWeek],
        at: time,
        *,
        today: Optional[date] = None,
    ) -> list[ParkingStatsResponse]:
        bucket = resolve_timeframe(day_of_week, at, self.interval_minutes, today=today)
        bucket_day = bucket.day_of_week if day_of_week is not None else None
        return self._collect(parking_ids, lambda data: aggregation.point_stats(data, bucket_day, bucket.time))

    def get_daily_parking_stats(
        self, parking_ids: Optional[Sequence[int]], day_of_week: DayOfWeek
    ) -> list[DailyParkingStatsResponse]:
        return self._collect(parking_ids, lambda data: aggregation.daily_stats(data, day_of_week))

    def get_weekly_parking_stats(self, parking_ids: Optional[Sequence[int]]) -> list[WeeklyParkingStatsResponse]:
        return self._collect(parking_ids, aggregation.weekly_stats)

    def get_collective_daily_parking_stats(
        self, parking_ids: Optional[Sequence[int]], day_of_week: DayOfWeek
    ) -> list[CollectiveDailyParkingStats]:
        return self._collect(parking_ids, lambda data: aggregation.collective_daily_stats(data, day_of_week))

    def get_collective_weekly_parking_stats(
        self, parking_ids: Optional[Sequence[int]]
    ) -> list[CollectiveWeeklyParkingStats]:
        return self._collect(parking_ids, aggregation.collective_weekly_stats)

    def get_parking_stats_for_parking(
        self,
        parking_id: int,
        day_of_week: Optional[DayOfWeek],
        at: time,
        *,
        today: Optional[date] = None,
    ) -> Result[ParkingStatsResponse]:
        return self._single(parking_id, lambda ids: self.get_parking_stats(ids, day_of_week, at, today=today))

    def get_daily_parking_stats_for_parking(
        self, parking_id: int, day_of_week: DayOfWeek
    ) -> Result[DailyParkingStatsResponse]:
        return self._single(parking_id, lambda ids: self.get_daily_parking_stats(ids, day_of_week))

    def get_weekly_parking_stats_for_parking(self, parking_id: int) -> Result[WeeklyParkingStatsResponse]:
        return self._single(parking_id, self.get_weekly_parking_stats)

    def get_collective_daily_parking_stats_for_parking(
        self, parking_id: int, day_of_week: DayOfWeek
    ) -> Result[CollectiveDailyParkingStats]:
        return self._single(parking_id, lambda ids: self.get_collective_daily_parking_stats(ids, day_of_week))

    def get_collective_weekly_parking_stats_for_parking(
        self, parking_id: int
    ) -> Result[CollectiveWeeklyParkingStats]:
        return self._single(parking_id, self.get_collective_weekly_parking_stats)

    def _history(self, parking_ids: Optional[Sequence[int]]) -> list[ParkingData]:
        """Records for the requested ids; unknown ids are dropped, no ids means all."""
        if not parking_ids:
            return sorted(self.data_repository.values(), key=lambda data: data.parking_id)
        records: list[ParkingData] = []
        seen: set[int] = set()
        for parking_id in parking_ids:
            if parking_id in seen:
                continue
            seen.add(parking_id)
            data = self.data_repository.get(parking_id)
            if data is not None:
                records.append(data)
        return records

    def _collect(self, parking_ids: Optional[Sequence[int]], compute: Callable[[ParkingData], Optional[S]]) -> list[S]:
        results: list[S] = []
        for data in self._history(parking_ids):
            stats = compute(data)
            if stats is not None:
                results.append(stats)
        return results

    def _single(self, parking_id: int, compute: Callable[[list[int]], list[S]]) -> Result[S]:
        """Stats for one parking that must exist in the live feed.

        A live parking without recorded history yields a successful empty result.
        """
        if not any(parking.parking_id == parking_id for parking in self.source.fetch_data()):
            return Result.failure(ParkingNotFoundById(parking_id))
        stats = compute([parking_id])
        return Result.success(stats[0] if stats else None)
