"""Celsius to Fahrenheit/Kelvin conversion."""

from __future__ import annotations

from .models import TemperatureResult

KELVIN_OFFSET = 273.15


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 1.8 + 32


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + KELVIN_OFFSET


def convert_celsius(celsius: float) -> TemperatureResult:
    """Express a Celsius reading in all three scales, unrounded."""
    return TemperatureResult(
        celsius=celsius,
        fahrenheit=celsius_to_fahrenheit(celsius),
        kelvin=celsius_to_kelvin(celsius),
    )
