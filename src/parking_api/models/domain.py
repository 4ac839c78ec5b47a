"""Domain models for live parking snapshots and occupancy history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Optional


class DayOfWeek(str, Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @property
    def ordinal(self) -> int:
        """Zero-based position in the week, Monday first (matches ``date.weekday``)."""
        return _DAY_ORDER.index(self)

    @classmethod
    def from_date(cls, value: date) -> "DayOfWeek":
        return _DAY_ORDER[value.weekday()]


_DAY_ORDER: tuple[DayOfWeek, ...] = tuple(DayOfWeek)


@dataclass(frozen=True, slots=True)
class Address:
    street_address: str
    geo_latitude: float
    geo_longitude: float


@dataclass(frozen=True, slots=True)
class ParkingResponse:
    """Live status of a single parking facility as reported by the upstream feed."""

    parking_id: int
    free_spots: int
    total_spots: int
    name: str
    symbol: str
    opening_hours: Optional[time] = None
    closing_hours: Optional[time] = None
    address: Optional[Address] = None

    @property
    def is_opened(self) -> bool:
        return self.is_opened_at(datetime.now().time())

    def is_opened_at(self, moment: time) -> bool:
        """Return True if the facility is open at the given time of day.

        A facility without opening or closing hours never closes. A closing hour
        earlier than the opening hour means the opening window spans midnight.
        """
        if self.opening_hours is None or self.closing_hours is None:
            return True
        if self.opening_hours < self.closing_hours:
            return self.opening_hours <= moment < self.closing_hours
        if self.opening_hours > self.closing_hours:
            return moment >= self.opening_hours or moment < self.closing_hours
        return False


@dataclass(frozen=True, slots=True)
class GeoLocation:
    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class AvailabilityData:
    """Running mean of the free/total ratio observed in one bucket."""

    count: int
    average_availability: float

    def with_sample(self, availability: float) -> AvailabilityData:
        total = self.average_availability * self.count + availability
        return AvailabilityData(count=self.count + 1, average_availability=total / (self.count + 1))


@dataclass(slots=True)
class ParkingData:
    """Occupancy history of one facility, bucketed by day of week and time of day."""

    parking_id: int
    total_spots: int
    free_spots_history: dict[DayOfWeek, dict[time, AvailabilityData]] = field(default_factory=dict)
