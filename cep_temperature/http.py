"""HTTP clients for the postal lookup and weather services."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import aiohttp

from .config import POSTAL_BASE_URL, WEATHER_BASE_URL
from .errors import (
    UpstreamConnectionError,
    UpstreamDecodeError,
    UpstreamResponseError,
    UpstreamTimeout,
)
from .models import PostalRecord, WeatherRecord

_LOGGER = logging.getLogger(__name__)


class PostalLookup(Protocol):
    """Resolves a postal code to an address with coordinates."""

    async def lookup(self, cep: str) -> PostalRecord: ...


class WeatherLookup(Protocol):
    """Fetches current conditions for a coordinate pair."""

    async def current(self, latitude: str, longitude: str) -> WeatherRecord: ...


async def _read_json(resp: aiohttp.ClientResponse, service: str) -> Any:
    if not 200 <= resp.status < 300:
        raise UpstreamResponseError(
            resp.status, f"{service} returned HTTP {resp.status}"
        )
    try:
        # Upstreams do not always label their bodies as application/json
        return await resp.json(content_type=None)
    except ValueError as err:
        raise UpstreamDecodeError(f"{service} returned malformed JSON") from err


class CepLookupClient:
    """Client for the AwesomeAPI CEP lookup service."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        *,
        base_url: str = POSTAL_BASE_URL,
        timeout: float = 10.0,
    ) -> None:
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def _url(self, cep: str) -> str:
        return f"{self._base_url}/json/{cep}"

    async def lookup(self, cep: str) -> PostalRecord:
        """Fetch the address record for ``cep``.

        Raises:
            UpstreamResponseError: If the service returns a non-2xx status
            UpstreamDecodeError: If the body is not a usable postal record
            UpstreamTimeout: If the request times out
            UpstreamConnectionError: If the network request fails
        """
        url = self._url(cep)
        try:
            async with self._session.get(
                url,
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                data = await _read_json(resp, "Postal lookup")
        except TimeoutError as err:
            raise UpstreamTimeout("Postal lookup request timed out") from err
        except aiohttp.ClientError as err:
            raise UpstreamConnectionError("Postal lookup request failed") from err

        try:
            record = PostalRecord.from_dict(data)
        except ValueError as err:
            raise UpstreamDecodeError(f"Unusable postal record: {err}") from err
        _LOGGER.debug(
            "CEP %s resolved to %s,%s", cep, record.latitude, record.longitude
        )
        return record


class OpenMeteoClient:
    """Client for the Open-Meteo current weather endpoint."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        *,
        base_url: str = WEATHER_BASE_URL,
        timeout: float = 10.0,
    ) -> None:
        self._session = session
        self._base_url = base_url
        self._timeout = timeout

    async def current(self, latitude: str, longitude: str) -> WeatherRecord:
        """Fetch the current temperature at a coordinate pair.

        Coordinates are sent exactly as received from the postal record.

        Raises:
            UpstreamResponseError: If the service returns a non-2xx status
            UpstreamDecodeError: If the body is not a usable weather record
            UpstreamTimeout: If the request times out
            UpstreamConnectionError: If the network request fails
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": "temperature_2m",
        }
        try:
            async with self._session.get(
                self._base_url,
                params=params,
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                data = await _read_json(resp, "Weather service")
        except TimeoutError as err:
            raise UpstreamTimeout("Weather request timed out") from err
        except aiohttp.ClientError as err:
            raise UpstreamConnectionError("Weather request failed") from err

        try:
            record = WeatherRecord.from_dict(data)
        except ValueError as err:
            raise UpstreamDecodeError(f"Unusable weather record: {err}") from err
        _LOGGER.debug(
            "Weather at %s,%s: %s C", latitude, longitude, record.temperature_celsius
        )
        return record
