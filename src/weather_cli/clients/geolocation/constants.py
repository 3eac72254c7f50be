from __future__ import annotations
# API Endpoint
GEOLOCATION_ENDPOINT = "https://ipapi.co/json"

# Response field holding the caller's city
CITY_FIELD = "city"

__all__ = ["GEOLOCATION_ENDPOINT", "CITY_FIELD"]
