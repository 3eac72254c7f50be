"""Centralized configuration management using Pydantic Settings.

Configuration is loaded from environment variables and an optional ``.env``
file in the working directory. The driver builds one ``Settings`` instance
and hands the relevant values to each client; nothing else reads the
process environment.

Example:
    >>> from weather_cli.config import load_settings
    >>> settings = load_settings()
    >>> settings.openweathermap_api_key
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_cli.clients.geolocation.constants import GEOLOCATION_ENDPOINT
from weather_cli.clients.openweathermap.constants import CURRENT_WEATHER_ENDPOINT
from weather_cli.clients.http import DEFAULT_TIMEOUT_SECONDS
from weather_cli.errors import ConfigError

LOGGER = logging.getLogger(__name__)

API_KEY_ENV_VAR = "OPENWEATHERMAP_API_KEY"


class Settings(BaseSettings):
    """Root settings container for the weather CLI.

    Required fields raise ValidationError if not provided.

    Example .env file:
        OPENWEATHERMAP_API_KEY=your_api_key
        REQUEST_TIMEOUT=10
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    openweathermap_api_key: str = Field(
        ...,
        min_length=1,
        description="OpenWeatherMap API key (REQUIRED)",
    )
    openweathermap_api_url: str = Field(
        default=CURRENT_WEATHER_ENDPOINT,
        description="OpenWeatherMap current weather endpoint",
    )
    geolocation_api_url: str = Field(
        default=GEOLOCATION_ENDPOINT,
        description="IP geolocation endpoint",
    )
    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Timeout in seconds for each upstream request",
    )

    @field_validator("openweathermap_api_url", "geolocation_api_url")
    @classmethod
    def validate_endpoint_url(cls, v: str) -> str:
        """Ensure endpoint starts with http:// or https://."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Endpoint URL must start with http:// or https://")
        return v.rstrip("/")


def _is_missing_api_key(exc: ValidationError) -> bool:
    for error in exc.errors():
        if error.get("loc") == ("openweathermap_api_key",) and error.get("type") in {
            "missing",
            "string_too_short",
        }:
            return True
    return False


def load_settings(env_file: Optional[str] = ".env") -> Settings:
    """Load settings from the environment and an optional env file.

    A missing env file is not an error; values then come from the process
    environment only.

    Args:
        env_file: Path of the env file to read, or None to skip it.

    Returns:
        Validated Settings instance.

    Raises:
        ConfigError: If required configuration is missing or invalid.
    """
    LOGGER.debug("Loading settings (env file: %s)", env_file)
    try:
        return Settings(_env_file=env_file)
    except ValidationError as exc:
        if _is_missing_api_key(exc):
            raise ConfigError(f"OpenWeatherMap API key not set ({API_KEY_ENV_VAR}).") from exc
        raise ConfigError(f"Configuration validation failed: {exc}") from exc


__all__ = ["API_KEY_ENV_VAR", "Settings", "load_settings"]
