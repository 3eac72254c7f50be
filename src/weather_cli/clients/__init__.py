"""Upstream API clients.

Available clients:
- geolocation: IP geolocation lookup for the caller's city
- openweathermap: OpenWeatherMap current weather data
"""

from . import geolocation
from . import openweathermap

__all__ = ["geolocation", "openweathermap"]
