"""Unit conversion and console rendering of weather reports."""
from __future__ import annotations
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from weather_cli.clients.openweathermap.models import WeatherReport
from weather_cli.errors import IncompleteWeatherDataError
from weather_cli.utils.terminal import TermColors, colorize

# 0 °C expressed in Kelvin
KELVIN_OFFSET = 273.15


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert a Kelvin temperature to Celsius."""
    return kelvin - KELVIN_OFFSET


@dataclass(frozen=True)
class WeatherSummary:
    """Display-ready values of a weather report (temperatures in Celsius)."""
    name: str
    country: str
    description: str
    temperature: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    humidity: int
    wind_speed: float
    cloudiness: int


def summarize(report: WeatherReport) -> WeatherSummary:
    """
    Convert a raw report into display-ready values.

    Raises:
        IncompleteWeatherDataError: If the report has no condition entry.
    """
    condition = report.primary_condition
    if condition is None:
        raise IncompleteWeatherDataError(
            "Incomplete weather data: response contains no weather conditions"
        )
    main = report.main
    return WeatherSummary(
        name=report.name,
        country=report.sys.country,
        description=condition.description,
        temperature=kelvin_to_celsius(main.temp),
        feels_like=kelvin_to_celsius(main.feels_like),
        temp_min=kelvin_to_celsius(main.temp_min),
        temp_max=kelvin_to_celsius(main.temp_max),
        pressure=main.pressure,
        humidity=main.humidity,
        wind_speed=report.wind.speed,
        cloudiness=report.clouds.all,
    )


def format_summary(summary: WeatherSummary) -> List[str]:
    return [
        f"Weather in {summary.name}, {summary.country}:",
        f"Description: {summary.description}",
        f"Temperature: {summary.temperature:.2f}°C",
        f"Feels Like: {summary.feels_like:.2f}°C",
        f"Min Temperature: {summary.temp_min:.2f}°C",
        f"Max Temperature: {summary.temp_max:.2f}°C",
        f"Pressure: {summary.pressure} hPa",
        f"Humidity: {summary.humidity}%",
        f"Wind Speed: {summary.wind_speed:.2f} m/s",
        f"Cloudiness: {summary.cloudiness}%",
    ]


def format_report(report: WeatherReport) -> List[str]:
    """Return the report as plain text lines, one per field."""
    return format_summary(summarize(report))


def render(report: WeatherReport, stream: Optional[TextIO] = None) -> None:
    """
    Write the formatted report to a stream (default: stdout).

    Nothing is written when the report is incomplete.

    Raises:
        IncompleteWeatherDataError: If the report has no condition entry.
    """
    stream = stream if stream is not None else sys.stdout
    lines = format_report(report)
    for line in lines:
        stream.write(colorize(line, TermColors.CYAN, stream=stream) + "\n")
    stream.flush()


__all__ = [
    "KELVIN_OFFSET",
    "WeatherSummary",
    "format_report",
    "format_summary",
    "kelvin_to_celsius",
    "render",
    "summarize",
]
