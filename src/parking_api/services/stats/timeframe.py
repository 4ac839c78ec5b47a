"""Alignment of arbitrary moments to the occupancy grid."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

from ...models.domain import DayOfWeek
from ...models.stats import OccupancyInfo


def round_to_interval(moment: datetime, interval_minutes: int) -> datetime:
    """Round ``moment`` to the nearest multiple of ``interval_minutes`` within its day.

    Seconds are ignored and ties round up, so with a 10 minute interval 10:05
    becomes 10:10. Rounding past 23:59 carries into the next day.
    """
    if interval_minutes <= 0:
        raise ValueError(f"Interval must be a positive number of minutes, got {interval_minutes}")

    midnight = datetime.combine(moment.date(), time.min, tzinfo=moment.tzinfo)
    minute_of_day = moment.hour * 60 + moment.minute
    rounded = (2 * minute_of_day + interval_minutes) // (2 * interval_minutes) * interval_minutes
    return midnight + timedelta(minutes=rounded)


def next_or_same(today: date, day_of_week: DayOfWeek) -> date:
    return today + timedelta(days=(day_of_week.ordinal - today.weekday()) % 7)


def resolve_timeframe(
    day_of_week: Optional[DayOfWeek],
    at: time,
    interval_minutes: int,
    *,
    today: Optional[date] = None,
) -> OccupancyInfo:
    """Return the grid bucket a query for ``day_of_week`` at ``at`` falls into.

    With a day, the date is first moved to the next occurrence of that day
    (today included) so that rounding across midnight lands on the following
    day of the week. Without a day, today's date is used.
    """
    base = today or date.today()
    if day_of_week is not None:
        base = next_or_same(base, day_of_week)
    rounded = round_to_interval(datetime.combine(base, at), interval_minutes)
    return OccupancyInfo(day_of_week=DayOfWeek.from_date(rounded.date()), time=rounded.time())
