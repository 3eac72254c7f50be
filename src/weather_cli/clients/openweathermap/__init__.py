"""OpenWeatherMap current weather client.

This package provides:
- Type-safe responses via Pydantic models
- Dependency injection for the HTTP client (testability)

Example usage:
    >>> from weather_cli.clients.openweathermap import OpenWeatherMapClient
    >>> with OpenWeatherMapClient(api_key="your-key") as client:
    ...     report = client.fetch_current("London")
"""

from __future__ import annotations

from .client import OpenWeatherMapClient, fetch_weather, parse_weather_report
from .constants import (
    API_KEY_PARAM,
    CURRENT_WEATHER_ENDPOINT,
    LOCATION_PARAM,
)
from .models import (
    ClientConfig,
    Clouds,
    Coord,
    MainMeasurements,
    Sys,
    WeatherCondition,
    WeatherReport,
    Wind,
)

__all__ = [
    # Client
    "OpenWeatherMapClient",
    "fetch_weather",
    "parse_weather_report",
    # Models
    "ClientConfig",
    "Clouds",
    "Coord",
    "MainMeasurements",
    "Sys",
    "WeatherCondition",
    "WeatherReport",
    "Wind",
    # Constants
    "API_KEY_PARAM",
    "CURRENT_WEATHER_ENDPOINT",
    "LOCATION_PARAM",
]
