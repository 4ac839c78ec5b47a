from datetime import time

import httpx
import pytest

from parking_api.config import settings
from parking_api.models.domain import GeoLocation
from parking_api.models.errors import UpstreamUnavailableError
from parking_api.services.parking.nominatim_client import NominatimClient
from parking_api.services.parking.pwr_client import PwrApiClient

PARKINGS_PAYLOAD = [
    {
        "parkingId": 1,
        "freeSpots": 12,
        "totalSpots": 100,
        "name": "Parking Wroniecka",
        "symbol": "WRO",
        "openingHours": "06:00:00",
        "closingHours": "22:00:00",
        "address": {"streetAddress": "Wroniecka 1", "geoLatitude": 51.108, "geoLongitude": 17.055},
    },
    {"parkingId": 2, "freeSpots": 3, "totalSpots": 40, "name": "Parking C13", "symbol": "C13"},
    {"parkingId": "broken"},
]


def test_pwr_client_parses_parkings_and_skips_invalid_entries() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=PARKINGS_PAYLOAD))
    client = PwrApiClient(url="https://parking.test/status", transport=transport)

    parkings = client.fetch_data()

    assert [parking.parking_id for parking in parkings] == [1, 2]
    assert parkings[0].opening_hours == time(6, 0)
    assert parkings[0].address.geo_latitude == pytest.approx(51.108)
    assert parkings[1].address is None


def test_pwr_client_retries_server_errors() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) < 3:
            return httpx.Response(502)
        return httpx.Response(200, json={"parkings": PARKINGS_PAYLOAD[:1]})

    client = PwrApiClient(
        url="https://parking.test/status",
        transport=httpx.MockTransport(handler),
        max_retries=2,
        backoff_seconds=0,
    )

    parkings = client.fetch_data()

    assert len(calls) == 3
    assert [parking.symbol for parking in parkings] == ["WRO"]


def test_pwr_client_gives_up_after_retries() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = PwrApiClient(
        url="https://parking.test/status",
        transport=httpx.MockTransport(handler),
        max_retries=1,
        backoff_seconds=0,
    )

    with pytest.raises(UpstreamUnavailableError):
        client.fetch_data()


def test_pwr_client_does_not_retry_client_errors() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(403)

    client = PwrApiClient(url="https://parking.test/status", transport=httpx.MockTransport(handler), max_retries=3)

    with pytest.raises(UpstreamUnavailableError):
        client.fetch_data()
    assert len(calls) == 1


def test_nominatim_client_returns_locations_in_order() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        seen["agent"] = request.headers["User-Agent"]
        return httpx.Response(200, json=[{"lat": "51.1", "lon": "17.03"}, {"lat": "52.2", "lon": "21.0"}, {"x": 1}])

    client = NominatimClient(
        base_url="https://geo.test/",
        user_agent="parking-tests",
        transport=httpx.MockTransport(handler),
    )

    locations = client.search("Plac Grunwaldzki")

    assert locations == [GeoLocation(51.1, 17.03), GeoLocation(52.2, 21.0)]
    assert seen["params"] == {"q": "Plac Grunwaldzki", "format": "json"}
    assert seen["agent"] == "parking-tests"


def test_nominatim_client_without_results() -> None:
    client = NominatimClient(base_url="https://geo.test", transport=httpx.MockTransport(lambda r: httpx.Response(200, json=[])))

    assert client.search("nowhere") == []


def test_each_client_uses_its_own_timeout_setting(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "pwr_api_timeout_seconds", 3.0)
    monkeypatch.setattr(settings, "nominatim_timeout_seconds", 7.5)

    assert PwrApiClient(url="https://parking.test/status").timeout == 3.0
    assert NominatimClient(base_url="https://geo.test").timeout == 7.5
    assert NominatimClient(base_url="https://geo.test", timeout=1.0).timeout == 1.0
