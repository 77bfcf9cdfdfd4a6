"""Current temperature by Brazilian postal code (CEP)."""

__version__ = "0.1.0"

from .config import Settings
from .conversion import convert_celsius
from .errors import (
    CepTemperatureError,
    InvalidZipcodeError,
    UpstreamConnectionError,
    UpstreamDecodeError,
    UpstreamError,
    UpstreamResponseError,
    UpstreamTimeout,
    ValidationError,
)
from .handler import TemperatureHandler, validate_cep
from .http import CepLookupClient, OpenMeteoClient, PostalLookup, WeatherLookup
from .models import (
    CurrentWeather,
    PostalRecord,
    TemperatureResult,
    WeatherRecord,
    WeatherUnits,
)
from .server import create_app, main

__all__ = [
    "CepLookupClient",
    "CepTemperatureError",
    "CurrentWeather",
    "InvalidZipcodeError",
    "OpenMeteoClient",
    "PostalLookup",
    "PostalRecord",
    "Settings",
    "TemperatureHandler",
    "TemperatureResult",
    "UpstreamConnectionError",
    "UpstreamDecodeError",
    "UpstreamError",
    "UpstreamResponseError",
    "UpstreamTimeout",
    "ValidationError",
    "WeatherLookup",
    "WeatherRecord",
    "WeatherUnits",
    "__version__",
    "convert_celsius",
    "create_app",
    "main",
    "validate_cep",
]
