"""Historical occupancy repository keyed by parking identifier."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter

from ..config import settings
from ..models.domain import AvailabilityData, DayOfWeek, ParkingData, ParkingResponse
from ..persistence.in_memory import InMemoryRepository
from ..services.stats.timeframe import round_to_interval

logger = logging.getLogger(__name__)

_ADAPTER: TypeAdapter[dict[int, ParkingData]] = TypeAdapter(dict[int, ParkingData])


class ParkingDataRepository(InMemoryRepository[int, ParkingData]):
    def __init__(self, location: Optional[Path] = None) -> None:
        super().__init__(location or settings.parking_data_file, _ADAPTER)

    def record_snapshot(self, snapshot: ParkingResponse, moment: datetime, interval_minutes: int) -> ParkingData:
        """Fold one live observation into the bucket that ``moment`` rounds to.

        The bucket keeps a running mean, so a single observation never replaces
        an average built from earlier samples.
        """
        if snapshot.total_spots <= 0:
            raise ValueError(f"Parking {snapshot.parking_id} reports no total spots")

        rounded = round_to_interval(moment, interval_minutes)
        day = DayOfWeek.from_date(rounded.date())
        bucket_time = rounded.time()
        availability = snapshot.free_spots / snapshot.total_spots

        with self._lock:
            current = self.get(snapshot.parking_id)
            history = {
                history_day: dict(buckets)
                for history_day, buckets in (current.free_spots_history.items() if current else ())
            }
            day_buckets = history.setdefault(day, {})
            existing = day_buckets.get(bucket_time)
            if existing is None:
                day_buckets[bucket_time] = AvailabilityData(count=1, average_availability=availability)
            else:
                day_buckets[bucket_time] = existing.with_sample(availability)

            record = ParkingData(
                parking_id=snapshot.parking_id,
                total_spots=snapshot.total_spots,
                free_spots_history=history,
            )
            self.put(snapshot.parking_id, record)

        logger.debug("Recorded availability %.3f for parking %s at %s %s", availability, snapshot.parking_id, day.value, bucket_time)
        return record
