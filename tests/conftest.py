"""Pytest configuration and fixtures for cep_temperature tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

SAO_PAULO_POSTAL: dict[str, Any] = {
    "cep": "01310100",
    "address_type": "Avenida",
    "address_name": "Paulista",
    "address": "Avenida Paulista",
    "state": "SP",
    "district": "Bela Vista",
    "lat": "-23.5505",
    "lng": "-46.6333",
    "city": "São Paulo",
    "city_ibge": "3550308",
    "ddd": "11",
}

SAO_PAULO_WEATHER: dict[str, Any] = {
    "latitude": -23.5505,
    "longitude": -46.6333,
    "generationtime_ms": 0.02,
    "utc_offset_seconds": 0,
    "timezone": "GMT",
    "timezone_abbreviation": "GMT",
    "elevation": 760.0,
    "current_units": {
        "time": "iso8601",
        "interval": "seconds",
        "temperature_2m": "°C",
    },
    "current": {
        "time": "2024-05-01T15:00",
        "interval": 900,
        "temperature_2m": 25.5,
    },
}


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


@pytest.fixture
def postal_payload() -> dict[str, Any]:
    return dict(SAO_PAULO_POSTAL)


@pytest.fixture
def weather_payload() -> dict[str, Any]:
    payload = dict(SAO_PAULO_WEATHER)
    payload["current"] = dict(SAO_PAULO_WEATHER["current"])
    return payload


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
    json_error: Exception | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call
        json_error: Exception to raise from json() call instead

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status

    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response
