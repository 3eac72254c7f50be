from __future__ import annotations
import logging
from typing import Any, Optional

from pydantic import BaseModel

from weather_cli.clients.http import DEFAULT_TIMEOUT_SECONDS, HTTPClient, RequestsHTTPClient
from weather_cli.errors import APIStatusError, DecodeError, FieldMissingError
from .constants import CITY_FIELD, GEOLOCATION_ENDPOINT

LOGGER = logging.getLogger(__name__)


class GeolocationConfig(BaseModel):
    """Configuration settings for the IP geolocation client.

    Attributes:
        base_url: Geolocation endpoint URL.
        timeout: Request timeout in seconds.
    """

    base_url: str = GEOLOCATION_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT_SECONDS


def extract_city(payload: Any) -> str:
    """Pull the city name out of a geolocation lookup result.

    Args:
        payload: Decoded JSON body of the lookup.

    Returns:
        Non-empty city name.

    Raises:
        DecodeError: If the payload is not a JSON object.
        FieldMissingError: If ``city`` is absent, not a string, or blank.
    """
    if not isinstance(payload, dict):
        raise DecodeError(
            f"Expected a JSON object from the geolocation service, got {type(payload).__name__}"
        )
    city = payload.get(CITY_FIELD)
    if not isinstance(city, str) or not city.strip():
        raise FieldMissingError(CITY_FIELD, "City not found in user location data")
    return city.strip()


# Resolves the caller's approximate city from their public IP address
class GeolocationClient:
    def __init__(
        self,
        config: Optional[GeolocationConfig] = None,
        http_client: Optional[HTTPClient] = None,
    ):
        self._config = config or GeolocationConfig()
        # HTTP client - track if we own it for cleanup
        self._owns_http_client = http_client is None
        self._http_client = http_client or RequestsHTTPClient()

    def close(self) -> None:
        if self._owns_http_client and hasattr(self._http_client, "close"):
            self._http_client.close()

    def __enter__(self) -> "GeolocationClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def lookup(self) -> Any:
        """Fetch the decoded geolocation body for the caller's IP.

        Raises:
            TransportError: On network failure.
            APIStatusError: If the service answers with a non-200 status.
            DecodeError: If the body is not valid JSON.
        """
        response = self._http_client.get(self._config.base_url, None, self._config.timeout)
        if not response.ok:
            LOGGER.error("Error fetching user location. Please enter a location manually.")
            raise APIStatusError(
                f"API request failed with status code {response.status_code}",
                status_code=response.status_code,
                detail=response.text[:200] or None,
            )
        return response.json()

    def resolve_city(self) -> str:
        """Return the caller's approximate city name."""
        city = extract_city(self.lookup())
        LOGGER.info("Resolved location from IP: %s", city)
        return city


def resolve_city(
    config: Optional[GeolocationConfig] = None,
    http_client: Optional[HTTPClient] = None,
) -> str:
    """Resolve the caller's city with a short-lived client."""
    with GeolocationClient(config=config, http_client=http_client) as client:
        return client.resolve_city()


__all__ = [
    "GeolocationConfig",
    "GeolocationClient",
    "extract_city",
    "resolve_city",
]
