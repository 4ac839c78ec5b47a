"""Geocoding via a Nominatim search endpoint."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from ...config import settings
from ...models.domain import GeoLocation
from .http_client import UpstreamClient

logger = logging.getLogger(__name__)


class NominatimClient(UpstreamClient):
    service_name = "Nominatim"

    def __init__(self, base_url: Optional[str] = None, user_agent: Optional[str] = None, **kwargs: Any) -> None:
        kwargs.setdefault("headers", {"User-Agent": user_agent or settings.nominatim_user_agent})
        kwargs.setdefault("timeout", settings.nominatim_timeout_seconds)
        super().__init__(**kwargs)
        self.base_url = (base_url or settings.nominatim_base_url).rstrip("/")

    def search(self, address: str) -> List[GeoLocation]:
        params = {"q": address, "format": "json"}
        payload = self._request("GET", f"{self.base_url}/search", params=params)

        locations: list[GeoLocation] = []
        for entry in payload if isinstance(payload, list) else []:
            try:
                locations.append(GeoLocation(latitude=float(entry["lat"]), longitude=float(entry["lon"])))
            except (KeyError, TypeError, ValueError):
                logger.debug("Ignoring malformed Nominatim result: %s", entry)
        return locations
