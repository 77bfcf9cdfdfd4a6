"""Runtime settings for the CEP temperature service."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PORT = 8080
POSTAL_BASE_URL = "https://cep.awesomeapi.com.br"
WEATHER_BASE_URL = "https://api.open-meteo.com/v1/forecast"


@dataclass(frozen=True)
class Settings:
    """Listener address, upstream endpoints and per-call timeouts.

    Attributes:
        host: Interface the HTTP server binds to.
        port: TCP port the HTTP server listens on.
        postal_base_url: Base URL of the postal lookup service; the
            code is appended as ``/json/{cep}``.
        weather_base_url: Forecast endpoint of the weather service.
        postal_timeout: Total seconds allowed for one postal lookup.
        weather_timeout: Total seconds allowed for one weather request.
    """

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    postal_base_url: str = POSTAL_BASE_URL
    weather_base_url: str = WEATHER_BASE_URL
    postal_timeout: float = 10.0
    weather_timeout: float = 10.0
