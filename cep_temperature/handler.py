"""Request handler for ``GET /{cep}``.

Runs validate, postal lookup, weather lookup and conversion in order and
stops at the first failure. Upstream error detail is logged but never sent
back to the caller.
"""

from __future__ import annotations

import logging
from typing import Final

from aiohttp import web

from .conversion import convert_celsius
from .errors import InvalidZipcodeError, UpstreamError
from .http import PostalLookup, WeatherLookup

_LOGGER = logging.getLogger(__name__)

CEP_LENGTH: Final = 8

INVALID_ZIPCODE: Final = "Invalid zipcode"
ZIPCODE_NOT_FOUND: Final = "Can not find zipcode"
WEATHER_NOT_FOUND: Final = "Can not find weather"


def validate_cep(cep: str) -> str:
    """Return ``cep`` unchanged if it is exactly 8 characters.

    Only the length is checked; digits are not enforced.

    Raises:
        InvalidZipcodeError: If the code is empty or the wrong length
    """
    if len(cep) != CEP_LENGTH:
        raise InvalidZipcodeError(cep)
    return cep


def error_response(status: int, message: str) -> web.Response:
    return web.json_response({"error": message}, status=status)


class TemperatureHandler:
    """Resolves a postal code to the current temperature in three scales."""

    def __init__(self, postal: PostalLookup, weather: WeatherLookup) -> None:
        self._postal = postal
        self._weather = weather

    async def handle(self, request: web.Request) -> web.Response:
        cep = request.match_info.get("cep", "")

        try:
            validate_cep(cep)
        except InvalidZipcodeError:
            _LOGGER.debug("Rejected postal code %r", cep)
            return error_response(422, INVALID_ZIPCODE)

        try:
            postal = await self._postal.lookup(cep)
        except UpstreamError as err:
            _LOGGER.warning("[%s] Postal lookup failed: %s", cep, err)
            return error_response(404, ZIPCODE_NOT_FOUND)

        try:
            weather = await self._weather.current(postal.latitude, postal.longitude)
        except UpstreamError as err:
            _LOGGER.warning("[%s] Weather lookup failed: %s", cep, err)
            return error_response(404, WEATHER_NOT_FOUND)

        result = convert_celsius(weather.temperature_celsius)
        _LOGGER.debug("[%s] %s C in %s", cep, result.celsius, postal.city or "?")
        return web.json_response(result.to_dict())
