"""IP geolocation client.

Example usage:
    >>> from weather_cli.clients.geolocation import GeolocationClient
    >>> with GeolocationClient() as client:
    ...     city = client.resolve_city()
"""

from __future__ import annotations

from .client import GeolocationClient, GeolocationConfig, extract_city, resolve_city
from .constants import CITY_FIELD, GEOLOCATION_ENDPOINT

__all__ = [
    "GeolocationClient",
    "GeolocationConfig",
    "extract_city",
    "resolve_city",
    "CITY_FIELD",
    "GEOLOCATION_ENDPOINT",
]
