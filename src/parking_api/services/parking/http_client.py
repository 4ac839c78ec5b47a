"""Shared retrying HTTP transport for upstream services."""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

import httpx

from ...config import settings
from ...models.errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)


class UpstreamClient:
    service_name = "upstream"

    def __init__(
        self,
        timeout: float = 10.0,
        max_retries: Optional[int] = None,
        backoff_seconds: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        self.timeout = timeout
        self.max_retries = max_retries if max_retries is not None else settings.upstream_max_retries
        self.backoff_seconds = backoff_seconds if backoff_seconds is not None else settings.upstream_backoff_seconds
        self._transport = transport
        self._headers = headers or {}

    def _get_client(self) -> httpx.Client:
        # one client per call keeps the clients safe to share between request threads
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=min(self.timeout, 5.0)),
            headers=self._headers,
            transport=self._transport,
        )

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        """Send a request and return the decoded JSON body.

        Timeouts, network errors and 5xx responses are retried with exponential
        backoff; anything left after the last attempt becomes
        ``UpstreamUnavailableError``.
        """
        client = self._get_client()
        try:
            attempt = 0
            while True:
                try:
                    response = client.request(method, url, **kwargs)
                    response.raise_for_status()
                    return response.json()
                except httpx.HTTPStatusError as exc:
                    if exc.response.status_code < 500:
                        raise UpstreamUnavailableError(
                            f"{self.service_name} rejected the request with status {exc.response.status_code}"
                        ) from exc
                    error: Exception = exc
                except (httpx.TimeoutException, httpx.NetworkError) as exc:
                    error = exc
                except ValueError as exc:
                    raise UpstreamUnavailableError(f"{self.service_name} returned a malformed response") from exc

                attempt += 1
                if attempt > self.max_retries:
                    logger.warning("%s request failed after %d attempts: %s", self.service_name, attempt, error)
                    raise UpstreamUnavailableError(f"{self.service_name} is not reachable: {error}") from error
                wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                logger.debug(
                    "%s request failed, retrying in %.1fs (attempt %d/%d): %s",
                    self.service_name,
                    wait_time,
                    attempt,
                    self.max_retries,
                    error,
                )
                time.sleep(wait_time)
        finally:
            client.close()
