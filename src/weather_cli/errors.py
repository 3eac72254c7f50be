"""Exception hierarchy shared by the weather CLI components."""
from __future__ import annotations
from typing import Optional


class WeatherCliError(Exception):
    """Base exception for all weather CLI errors."""
    pass


class ConfigError(WeatherCliError):
    """Missing or invalid configuration (API key, endpoint URLs, etc.)."""
    pass


class InputError(WeatherCliError):
    """Invalid interactive input (menu choice, empty location)."""
    pass


class TransportError(WeatherCliError):
    """Network-level failure before an HTTP status was received."""
    pass


class APIStatusError(WeatherCliError):
    """Upstream API answered with a non-200 status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class DecodeError(WeatherCliError):
    """Response body could not be decoded into the expected structure."""
    pass


class FieldMissingError(DecodeError):
    """A required field is absent from an otherwise valid response."""

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Field '{field}' not found in response")
        self.field = field


class IncompleteWeatherDataError(WeatherCliError):
    """Weather report lacks the data needed for rendering."""
    pass


__all__ = [
    "WeatherCliError",
    "ConfigError",
    "InputError",
    "TransportError",
    "APIStatusError",
    "DecodeError",
    "FieldMissingError",
    "IncompleteWeatherDataError",
]
