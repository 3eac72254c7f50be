from __future__ import annotations
from weather_cli.clients.http import DEFAULT_TIMEOUT_SECONDS

# API Endpoint
CURRENT_WEATHER_ENDPOINT = "https://api.openweathermap.org/data/2.5/weather"

# Query parameter names
LOCATION_PARAM = "q"
API_KEY_PARAM = "appid"

# Characters of the raw error body kept on APIStatusError
ERROR_DETAIL_MAX_CHARS = 500

__all__ = [
    "CURRENT_WEATHER_ENDPOINT",
    "LOCATION_PARAM",
    "API_KEY_PARAM",
    "ERROR_DETAIL_MAX_CHARS",
    "DEFAULT_TIMEOUT_SECONDS",
]
