"""Error types for the CEP temperature service."""

from __future__ import annotations


class CepTemperatureError(Exception):
    """Base error for CEP temperature failures."""


class ValidationError(CepTemperatureError):
    """Request input rejected before any upstream call."""


class InvalidZipcodeError(ValidationError):
    """Postal code is empty or not exactly 8 characters."""

    def __init__(self, cep: str) -> None:
        super().__init__(f"Invalid zipcode: {cep!r}")
        self.cep = cep


class UpstreamError(CepTemperatureError):
    """Base error for postal lookup and weather service failures."""


class UpstreamTimeout(UpstreamError):
    """Timeout while waiting on an upstream service."""


class UpstreamConnectionError(UpstreamError):
    """Network connection to an upstream service failed."""


class UpstreamResponseError(UpstreamError):
    """Upstream service answered with a non-2xx status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status


class UpstreamDecodeError(UpstreamError):
    """Upstream body was not the expected JSON document."""
