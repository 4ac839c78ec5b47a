"""Collaborator interfaces consumed by the parking service."""

from __future__ import annotations

from typing import Protocol

from ...models.domain import GeoLocation, ParkingResponse


class FacilitySource(Protocol):
    def fetch_data(self) -> list[ParkingResponse]:
        """Return a fresh list of live parking snapshots."""


class Geocoder(Protocol):
    def search(self, address: str) -> list[GeoLocation]:
        """Return candidate locations for a free-text address, best match first."""
