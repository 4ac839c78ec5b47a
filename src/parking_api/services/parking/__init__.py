"""Parking lookup and statistics services."""

from .filters import ParkingFilter
from .nominatim_client import NominatimClient
from .pwr_client import PwrApiClient
from .service import ParkingService

__all__ = [
    "ParkingService",
    "ParkingFilter",
    "PwrApiClient",
    "NominatimClient",
]
