from datetime import time

import pytest

from parking_api.models.domain import Address, GeoLocation, ParkingResponse
from parking_api.services.geospatial import find_closest, haversine_km
from parking_api.services.parking.filters import ParkingFilter


def _parking(parking_id: int, lat: float | None, lon: float | None, **overrides) -> ParkingResponse:
    fields = dict(
        parking_id=parking_id,
        free_spots=5,
        total_spots=10,
        name=f"Parking {parking_id}",
        symbol=f"P{parking_id}",
        address=Address(f"street {parking_id}", lat, lon) if lat is not None else None,
    )
    fields.update(overrides)
    return ParkingResponse(**fields)


def test_haversine_distance() -> None:
    assert haversine_km(51.1, 17.0, 51.1, 17.0) == 0.0
    assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.195, abs=0.01)
    # Wroclaw to Warsaw
    assert haversine_km(51.1079, 17.0385, 52.2297, 21.0122) == pytest.approx(301.0, abs=2.0)


def test_find_closest_picks_minimum_distance() -> None:
    parkings = [_parking(1, 52.0, 21.0), _parking(2, 51.11, 17.06), _parking(3, None, None)]

    closest = find_closest(GeoLocation(51.1, 17.05), parkings)

    assert closest.parking_id == 2


def test_find_closest_tie_keeps_first() -> None:
    parkings = [_parking(1, 10.0, 10.0), _parking(2, 10.0, 10.0)]

    assert find_closest(GeoLocation(11.0, 11.0), parkings).parking_id == 1


def test_find_closest_without_parkings() -> None:
    assert find_closest(GeoLocation(0.0, 0.0), []) is None


@pytest.mark.parametrize(
    ("opening", "closing", "moment", "expected"),
    [
        (None, None, time(3, 0), True),
        (time(8, 0), None, time(3, 0), True),
        (time(8, 0), time(20, 0), time(8, 0), True),
        (time(8, 0), time(20, 0), time(20, 0), False),
        (time(22, 0), time(6, 0), time(23, 30), True),
        (time(22, 0), time(6, 0), time(5, 59), True),
        (time(22, 0), time(6, 0), time(12, 0), False),
        (time(12, 0), time(12, 0), time(12, 0), False),
    ],
)
def test_is_opened_at(opening, closing, moment, expected) -> None:
    parking = _parking(1, None, None, opening_hours=opening, closing_hours=closing)

    assert parking.is_opened_at(moment) is expected


def test_filter_matches_query_containing_facility_values() -> None:
    parking = _parking(1, None, None, free_spots=0, opening_hours=time(8, 0), closing_hours=time(16, 0))

    assert ParkingFilter().matches(parking, time(9, 0))
    assert ParkingFilter(symbol="near p1", name="PARKING 1 lot").matches(parking, time(9, 0))
    assert not ParkingFilter(symbol="p").matches(parking, time(9, 0))
    assert not ParkingFilter(parking_id=2).matches(parking, time(9, 0))
    assert ParkingFilter(is_opened=False, has_free_spots=False).matches(parking, time(17, 0))
    assert not ParkingFilter(is_opened=True).matches(parking, time(17, 0))
    assert not ParkingFilter(has_free_spots=True).matches(parking, time(9, 0))
