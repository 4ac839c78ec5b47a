"""HTTP client for the live parking status feed."""

from __future__ import annotations

import logging
from datetime import time
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...config import settings
from ...models.domain import Address, ParkingResponse
from ...models.errors import UpstreamUnavailableError
from .http_client import UpstreamClient

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Accept-Encoding": "gzip",
    "Accept-Language": "pl",
    "Referer": "https://iparking.pwr.edu.pl",
    "X-Requested-With": "XMLHttpRequest",
}


class _AddressPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    street_address: str = Field(default="", alias="streetAddress")
    geo_latitude: float = Field(alias="geoLatitude")
    geo_longitude: float = Field(alias="geoLongitude")


class _ParkingPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    parking_id: int = Field(alias="parkingId")
    free_spots: int = Field(alias="freeSpots", ge=0)
    total_spots: int = Field(alias="totalSpots", gt=0)
    name: str
    symbol: str
    opening_hours: Optional[time] = Field(default=None, alias="openingHours")
    closing_hours: Optional[time] = Field(default=None, alias="closingHours")
    address: Optional[_AddressPayload] = None

    def to_domain(self) -> ParkingResponse:
        address = None
        if self.address is not None:
            address = Address(
                street_address=self.address.street_address,
                geo_latitude=self.address.geo_latitude,
                geo_longitude=self.address.geo_longitude,
            )
        return ParkingResponse(
            parking_id=self.parking_id,
            free_spots=min(self.free_spots, self.total_spots),
            total_spots=self.total_spots,
            name=self.name,
            symbol=self.symbol,
            opening_hours=self.opening_hours,
            closing_hours=self.closing_hours,
            address=address,
        )


class PwrApiClient(UpstreamClient):
    service_name = "Parking status API"

    def __init__(self, url: Optional[str] = None, **kwargs: Any) -> None:
        kwargs.setdefault("headers", DEFAULT_HEADERS)
        kwargs.setdefault("timeout", settings.pwr_api_timeout_seconds)
        super().__init__(**kwargs)
        self.url = url or settings.pwr_api_url

    def fetch_data(self) -> List[ParkingResponse]:
        payload = self._request("GET", self.url)
        if isinstance(payload, dict):
            payload = payload.get("parkings", payload.get("places", []))
        if not isinstance(payload, list):
            raise UpstreamUnavailableError(f"{self.service_name} returned an unexpected payload")

        parkings: list[ParkingResponse] = []
        for entry in payload:
            try:
                parkings.append(_ParkingPayload.model_validate(entry).to_domain())
            except ValidationError as exc:
                logger.warning("Skipping invalid parking entry: %s", exc)
        logger.info("Fetched %d parkings from %s", len(parkings), self.service_name)
        return parkings
