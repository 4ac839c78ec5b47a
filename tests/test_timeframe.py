from datetime import date, datetime, time

import pytest

from parking_api.models.domain import DayOfWeek
from parking_api.models.stats import OccupancyInfo
from parking_api.services.stats.timeframe import next_or_same, resolve_timeframe, round_to_interval

MONDAY = date(2024, 12, 30)
WEDNESDAY = date(2025, 1, 1)


@pytest.mark.parametrize(
    ("hour", "minute", "expected"),
    [
        (10, 7, time(10, 10)),
        (10, 4, time(10, 0)),
        (10, 5, time(10, 10)),
        (10, 0, time(10, 0)),
        (9, 55, time(10, 0)),
    ],
)
def test_round_to_interval_half_up(hour: int, minute: int, expected: time) -> None:
    rounded = round_to_interval(datetime.combine(MONDAY, time(hour, minute, 42)), 10)

    assert rounded.date() == MONDAY
    assert rounded.time() == expected


def test_round_to_interval_with_quarter_hours() -> None:
    assert round_to_interval(datetime(2025, 1, 1, 10, 7), 15).time() == time(10, 0)
    assert round_to_interval(datetime(2025, 1, 1, 10, 8), 15).time() == time(10, 15)


def test_round_to_interval_carries_into_next_day() -> None:
    rounded = round_to_interval(datetime(2025, 1, 5, 23, 57), 10)

    assert rounded == datetime(2025, 1, 6, 0, 0)


def test_round_to_interval_rejects_non_positive_interval() -> None:
    with pytest.raises(ValueError):
        round_to_interval(datetime(2025, 1, 1, 10, 7), 0)


def test_next_or_same_includes_today() -> None:
    assert next_or_same(MONDAY, DayOfWeek.MONDAY) == MONDAY
    assert next_or_same(WEDNESDAY, DayOfWeek.MONDAY) == date(2025, 1, 6)
    assert next_or_same(WEDNESDAY, DayOfWeek.TUESDAY) == date(2025, 1, 7)


def test_resolve_timeframe_with_day_is_independent_of_today() -> None:
    from_monday = resolve_timeframe(DayOfWeek.MONDAY, time(10, 7), 10, today=MONDAY)
    from_wednesday = resolve_timeframe(DayOfWeek.MONDAY, time(10, 7), 10, today=WEDNESDAY)

    assert from_monday == from_wednesday == OccupancyInfo(DayOfWeek.MONDAY, time(10, 10))


def test_resolve_timeframe_rolls_day_over_at_midnight() -> None:
    bucket = resolve_timeframe(DayOfWeek.SUNDAY, time(23, 56), 10, today=WEDNESDAY)

    assert bucket == OccupancyInfo(DayOfWeek.MONDAY, time(0, 0))


def test_resolve_timeframe_without_day_uses_today() -> None:
    bucket = resolve_timeframe(None, time(14, 33), 10, today=WEDNESDAY)

    assert bucket == OccupancyInfo(DayOfWeek.WEDNESDAY, time(14, 30))
