"""Wire records for the postal lookup and weather services.

Upstream documents are decoded with ``from_dict`` and the response payload is
encoded with ``to_dict``. Decoding raises ``ValueError`` when a required
field is missing or has the wrong type; optional fields fall back to their
zero value the way the upstream services omit them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any


def _require_mapping(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return str(value)


def _number(
    data: dict[str, Any],
    key: str,
    default: float = 0.0,
    *,
    required: bool = False,
) -> float:
    value = data.get(key)
    if value is None and not required:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number, got {value!r}")
    try:
        number = float(value)
    except OverflowError as err:
        raise ValueError(f"{key} is out of range") from err
    # json.loads accepts NaN, Infinity and 1e400, none of which re-encode as JSON
    if not math.isfinite(number):
        raise ValueError(f"{key} must be finite, got {value!r}")
    return number


@dataclass(frozen=True)
class PostalRecord:
    """Address and coordinates for a postal code (AwesomeAPI CEP document).

    Attributes:
        cep: Postal code as echoed by the lookup service.
        latitude: Latitude string, passed to the weather service untouched.
        longitude: Longitude string, passed to the weather service untouched.
    """

    cep: str
    latitude: str
    longitude: str
    address_type: str = ""
    address_name: str = ""
    address: str = ""
    state: str = ""
    district: str = ""
    city: str = ""
    city_ibge: str = ""
    ddd: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> PostalRecord:
        """Decode a postal lookup response body."""
        payload = _require_mapping(data, "Postal record")
        lat = payload.get("lat")
        lng = payload.get("lng")
        if not isinstance(lat, str) or not lat:
            raise ValueError(f"Postal record has no usable lat: {lat!r}")
        if not isinstance(lng, str) or not lng:
            raise ValueError(f"Postal record has no usable lng: {lng!r}")
        return cls(
            cep=_str(payload, "cep"),
            latitude=lat,
            longitude=lng,
            address_type=_str(payload, "address_type"),
            address_name=_str(payload, "address_name"),
            address=_str(payload, "address"),
            state=_str(payload, "state"),
            district=_str(payload, "district"),
            city=_str(payload, "city"),
            city_ibge=_str(payload, "city_ibge"),
            ddd=_str(payload, "ddd"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the lookup service wire format."""
        return {
            "cep": self.cep,
            "address_type": self.address_type,
            "address_name": self.address_name,
            "address": self.address,
            "state": self.state,
            "district": self.district,
            "lat": self.latitude,
            "lng": self.longitude,
            "city": self.city,
            "city_ibge": self.city_ibge,
            "ddd": self.ddd,
        }


@dataclass(frozen=True)
class WeatherUnits:
    """Unit labels for the ``current`` block."""

    time: str = ""
    interval: str = ""
    temperature_2m: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> WeatherUnits:
        payload = _require_mapping(data, "current_units")
        return cls(
            time=_str(payload, "time"),
            interval=_str(payload, "interval"),
            temperature_2m=_str(payload, "temperature_2m"),
        )


@dataclass(frozen=True)
class CurrentWeather:
    """Current conditions reported by Open-Meteo.

    Attributes:
        temperature_2m: Air temperature at 2 m, in Celsius.
        time: ISO8601 local time of the observation.
        interval: Observation interval in seconds.
    """

    temperature_2m: float
    time: str = ""
    interval: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> CurrentWeather:
        payload = _require_mapping(data, "current")
        if "temperature_2m" not in payload:
            raise ValueError("current block has no temperature_2m")
        interval = payload.get("interval", 0)
        if isinstance(interval, bool) or not isinstance(interval, int):
            raise ValueError(f"interval must be an integer, got {interval!r}")
        return cls(
            temperature_2m=_number(payload, "temperature_2m", required=True),
            time=_str(payload, "time"),
            interval=interval,
        )


@dataclass(frozen=True)
class WeatherRecord:
    """Open-Meteo forecast document restricted to ``current=temperature_2m``.

    Only ``current.temperature_2m`` is used downstream; the remaining fields
    are kept for logging and debugging.
    """

    current: CurrentWeather
    latitude: float = 0.0
    longitude: float = 0.0
    generationtime_ms: float = 0.0
    utc_offset_seconds: int = 0
    timezone: str = ""
    timezone_abbreviation: str = ""
    elevation: float = 0.0
    current_units: WeatherUnits = field(default_factory=WeatherUnits)

    @property
    def temperature_celsius(self) -> float:
        return self.current.temperature_2m

    @classmethod
    def from_dict(cls, data: Any) -> WeatherRecord:
        """Decode a weather service response body."""
        payload = _require_mapping(data, "Weather record")
        if "current" not in payload:
            raise ValueError("Weather record has no current block")
        units = payload.get("current_units")
        return cls(
            current=CurrentWeather.from_dict(payload["current"]),
            latitude=_number(payload, "latitude"),
            longitude=_number(payload, "longitude"),
            generationtime_ms=_number(payload, "generationtime_ms"),
            utc_offset_seconds=int(_number(payload, "utc_offset_seconds")),
            timezone=_str(payload, "timezone"),
            timezone_abbreviation=_str(payload, "timezone_abbreviation"),
            elevation=_number(payload, "elevation"),
            current_units=(
                WeatherUnits.from_dict(units) if units is not None else WeatherUnits()
            ),
        )


@dataclass(frozen=True)
class TemperatureResult:
    """Response payload: one temperature in three scales."""

    celsius: float
    fahrenheit: float
    kelvin: float

    def to_dict(self) -> dict[str, float]:
        """Convert to the response wire format."""
        return {
            "temp_C": self.celsius,
            "temp_F": self.fahrenheit,
            "temp_K": self.kelvin,
        }
