"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...config import settings
from ...data.parking_data_repository import ParkingDataRepository
from ..dependencies import get_parking_data_repository

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/storage", status_code=status.HTTP_200_OK)
def health_storage(repository: ParkingDataRepository = Depends(get_parking_data_repository)) -> dict:
    """Report what the historical repository holds and where it persists it."""
    return {
        "location": str(repository.location),
        "snapshot_exists": repository.location.exists(),
        "parkings_tracked": len(repository),
        "interval_minutes": settings.stats_interval_minutes,
    }
