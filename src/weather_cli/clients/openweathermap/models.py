"""Pydantic models for the OpenWeatherMap current weather response."""
from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .constants import CURRENT_WEATHER_ENDPOINT, DEFAULT_TIMEOUT_SECONDS

# Wrongly typed values are rejected rather than coerced; ints still pass as floats
_FROZEN = ConfigDict(frozen=True, extra="ignore", strict=True)


class Coord(BaseModel):
    """Geographic coordinates of the reporting location.

    Attributes:
        lon: Longitude in decimal degrees.
        lat: Latitude in decimal degrees.
    """

    model_config = _FROZEN

    lon: float = 0.0
    lat: float = 0.0


class WeatherCondition(BaseModel):
    """Single weather condition entry.

    Attributes:
        id: Condition code.
        main: Condition group (Rain, Snow, Clear, ...).
        description: Human-readable description.
        icon: Icon identifier.
    """

    model_config = _FROZEN

    id: int = 0
    main: str = ""
    description: str = ""
    icon: str = ""


class MainMeasurements(BaseModel):
    """Core measurements. Temperatures are in Kelvin.

    Attributes:
        temp: Current temperature.
        feels_like: Perceived temperature.
        temp_min: Minimum temperature observed in the area.
        temp_max: Maximum temperature observed in the area.
        pressure: Atmospheric pressure in hPa.
        humidity: Relative humidity in percent.
    """

    model_config = _FROZEN

    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    humidity: int


class Wind(BaseModel):
    """Wind measurements.

    Attributes:
        speed: Wind speed in m/s.
        deg: Wind direction in degrees.
        gust: Gust speed in m/s.
    """

    model_config = _FROZEN

    speed: float = 0.0
    deg: int = 0
    gust: float = 0.0


class Clouds(BaseModel):
    model_config = _FROZEN

    all: int = 0


class Sys(BaseModel):
    """Location metadata attached by the service.

    Attributes:
        type: Internal parameter.
        id: Internal station id.
        country: ISO country code.
        sunrise: Sunrise as a Unix timestamp.
        sunset: Sunset as a Unix timestamp.
    """

    model_config = _FROZEN

    type: int = 0
    id: int = 0
    country: str = ""
    sunrise: int = 0
    sunset: int = 0


class WeatherReport(BaseModel):
    """Parsed current weather response.

    ``main`` is required: a response without it is rejected instead of
    being filled with zero measurements. Every other group falls back to
    its empty default when the service omits it.

    Attributes:
        coord: Location coordinates.
        weather: Ordered condition entries; the first is the primary one.
        base: Internal data source tag.
        main: Temperature, pressure and humidity.
        visibility: Visibility in metres.
        wind: Wind measurements.
        clouds: Cloudiness.
        dt: Observation time as a Unix timestamp.
        sys: Country and sunrise/sunset.
        timezone: Shift in seconds from UTC.
        id: City id.
        name: City name.
        cod: Status code echoed by the service.
    """

    model_config = _FROZEN

    coord: Coord = Field(default_factory=Coord)
    weather: List[WeatherCondition] = Field(default_factory=list)
    base: str = ""
    main: MainMeasurements
    visibility: int = 0
    wind: Wind = Field(default_factory=Wind)
    clouds: Clouds = Field(default_factory=Clouds)
    dt: int = 0
    sys: Sys = Field(default_factory=Sys)
    timezone: int = 0
    id: int = 0
    name: str = ""
    cod: int = 0

    @property
    def primary_condition(self) -> Optional[WeatherCondition]:
        """First condition entry, or None when the list is empty."""
        return self.weather[0] if self.weather else None


class ClientConfig(BaseModel):
    """Configuration settings for the OpenWeatherMap client.

    Attributes:
        base_url: Current weather endpoint URL.
        timeout: Request timeout in seconds.
    """

    base_url: str = CURRENT_WEATHER_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT_SECONDS


__all__ = [
    "Coord",
    "WeatherCondition",
    "MainMeasurements",
    "Wind",
    "Clouds",
    "Sys",
    "WeatherReport",
    "ClientConfig",
]
