"""Shared pytest fixtures for weather CLI tests."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Generator, List, Mapping, Optional

import pytest

from weather_cli.clients.http import HTTPResponse
from weather_cli.utils.logging_config import ColoredFormatter

LONDON_PAYLOAD: Dict[str, Any] = {
    "name": "London",
    "sys": {"country": "GB"},
    "weather": [{"description": "clear sky"}],
    "main": {
        "temp": 288.15,
        "feels_like": 287.0,
        "temp_min": 286.0,
        "temp_max": 290.0,
        "pressure": 1012,
        "humidity": 60,
    },
    "wind": {"speed": 3.5},
    "clouds": {"all": 10},
}


class MockHTTPClient:
    """Records GET calls and replays canned responses in order."""

    def __init__(self, responses: Optional[List[HTTPResponse]] = None):
        self.responses = list(responses or [])
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def get(
        self,
        url: str,
        params: Optional[Mapping[str, str]],
        timeout: Optional[float],
    ) -> HTTPResponse:
        self.calls.append({
            "url": url,
            "params": dict(params) if params else None,
            "timeout": timeout,
        })
        if not self.responses:
            raise AssertionError(f"Unexpected request to {url}")
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


def json_response(body: Any, status_code: int = 200) -> HTTPResponse:
    """Build an HTTPResponse with a JSON-encoded body."""
    return HTTPResponse(status_code=status_code, text=json.dumps(body))


@pytest.fixture
def london_payload() -> Dict[str, Any]:
    """Sample OpenWeatherMap body for London."""
    return copy.deepcopy(LONDON_PAYLOAD)


@pytest.fixture
def full_payload(london_payload: Dict[str, Any]) -> Dict[str, Any]:
    """London body with every documented field populated."""
    london_payload.update({
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [
            {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"},
            {"id": 701, "main": "Mist", "description": "mist", "icon": "50d"},
        ],
        "base": "stations",
        "visibility": 10000,
        "dt": 1700000000,
        "timezone": 0,
        "id": 2643743,
        "cod": 200,
    })
    london_payload["wind"].update({"deg": 250, "gust": 6.2})
    london_payload["sys"].update({
        "type": 2,
        "id": 2075535,
        "sunrise": 1699945000,
        "sunset": 1699978000,
    })
    return london_payload


@pytest.fixture
def clean_env(monkeypatch) -> None:
    """Remove all weather CLI env vars for isolated testing."""
    env_vars = [
        "OPENWEATHERMAP_API_KEY",
        "OPENWEATHERMAP_API_URL",
        "GEOLOCATION_API_URL",
        "REQUEST_TIMEOUT",
        "NO_COLOR",
        "FORCE_COLOR",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def mock_env_minimal(monkeypatch, clean_env) -> None:
    """Set minimal required environment variables for testing."""
    monkeypatch.setenv("OPENWEATHERMAP_API_KEY", "test-api-key")


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Restore root logger state changed by configure_logging()."""
    root_logger = logging.getLogger()
    level = root_logger.level

    yield

    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, ColoredFormatter):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def missing_env_file(tmp_path: Path) -> str:
    """Path of an env file that does not exist.

    Keeps a developer's real .env out of the tests.
    """
    return str(tmp_path / "absent.env")
