"""Lazily built service singletons shared by the routers."""

from __future__ import annotations

from functools import lru_cache

from ..config import settings
from ..data.parking_data_repository import ParkingDataRepository
from ..services.parking import NominatimClient, ParkingService, PwrApiClient


@lru_cache()
def get_parking_data_repository() -> ParkingDataRepository:
    return ParkingDataRepository(settings.parking_data_file)


@lru_cache()
def get_parking_service() -> ParkingService:
    return ParkingService(
        source=PwrApiClient(),
        geocoder=NominatimClient(),
        data_repository=get_parking_data_repository(),
        interval_minutes=settings.stats_interval_minutes,
    )
