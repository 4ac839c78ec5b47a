"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from ..models.domain import GeoLocation, ParkingResponse

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def find_closest(location: GeoLocation, parkings: Sequence[ParkingResponse]) -> Optional[ParkingResponse]:
    """Return the parking nearest to ``location``.

    On equal distances the one listed first wins. Parkings without an address
    are ignored.
    """

    closest: Optional[ParkingResponse] = None
    best_distance = math.inf
    for parking in parkings:
        if parking.address is None:
            continue
        distance = haversine_km(
            location.latitude,
            location.longitude,
            parking.address.geo_latitude,
            parking.address.geo_longitude,
        )
        if distance < best_distance:
            closest, best_distance = parking, distance
    return closest
