from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from weather_cli.clients.http import HTTPClient, RequestsHTTPClient
from weather_cli.errors import APIStatusError, ConfigError, DecodeError, InputError
from .constants import API_KEY_PARAM, ERROR_DETAIL_MAX_CHARS, LOCATION_PARAM
from .models import ClientConfig, WeatherReport

LOGGER = logging.getLogger(__name__)


def parse_weather_report(payload: Any) -> WeatherReport:
    """
    Validate a decoded response body against the WeatherReport schema.

    Args:
        payload: Decoded JSON body.

    Returns:
        WeatherReport instance.

    Raises:
        DecodeError: If the payload does not match the schema.
    """
    if not isinstance(payload, dict):
        raise DecodeError(
            f"Expected a JSON object from the weather service, got {type(payload).__name__}"
        )
    try:
        return WeatherReport.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(f"Unexpected weather response structure: {exc}") from exc


# Main client class for the OpenWeatherMap current weather API
class OpenWeatherMapClient:
    def __init__(
        self,
        api_key: str,
        config: Optional[ClientConfig] = None,
        http_client: Optional[HTTPClient] = None,
    ):
        if not api_key:
            raise ConfigError("OpenWeatherMap API key not set.")
        self._api_key = api_key
        self._config = config or ClientConfig()
        # HTTP client - track if we own it for cleanup
        self._owns_http_client = http_client is None
        self._http_client = http_client or RequestsHTTPClient()

    def close(self) -> None:
        if self._owns_http_client and hasattr(self._http_client, "close"):
            self._http_client.close()

    def __enter__(self) -> "OpenWeatherMapClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    # The service only accepts the key as a query parameter
    def _build_params(self, location: str) -> Dict[str, str]:
        return {
            LOCATION_PARAM: location,
            API_KEY_PARAM: self._api_key,
        }

    def fetch_current(self, location: str) -> WeatherReport:
        """
        Fetch current weather for a location.

        Args:
            location: Free-form place name, e.g. "London" or "Paris,FR".

        Returns:
            Parsed WeatherReport (temperatures in Kelvin).

        Raises:
            InputError: If location is empty.
            TransportError: On network failure.
            APIStatusError: If the service answers with a non-200 status.
            DecodeError: If the body does not match the WeatherReport schema.
        """
        location = (location or "").strip()
        if not location:
            raise InputError("Invalid location: location must not be empty")

        LOGGER.info("Fetching current weather for %s", location)
        response = self._http_client.get(
            self._config.base_url,
            self._build_params(location),
            self._config.timeout,
        )
        if not response.ok:
            LOGGER.error("API request failed with status code %d", response.status_code)
            LOGGER.error("%s", response.text)
            raise APIStatusError(
                f"API request failed with status code {response.status_code}",
                status_code=response.status_code,
                detail=response.text[:ERROR_DETAIL_MAX_CHARS] or None,
            )
        return parse_weather_report(response.json())


def fetch_weather(
    location: str,
    api_key: str,
    *,
    config: Optional[ClientConfig] = None,
    http_client: Optional[HTTPClient] = None,
) -> WeatherReport:
    """Fetch current weather for a location with a short-lived client."""
    with OpenWeatherMapClient(api_key, config=config, http_client=http_client) as client:
        return client.fetch_current(location)


__all__ = [
    "OpenWeatherMapClient",
    "fetch_weather",
    "parse_weather_report",
]
