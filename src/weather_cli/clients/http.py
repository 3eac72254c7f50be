"""HTTP transport shared by the upstream API clients."""
from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol, Sequence

import requests

from weather_cli.errors import DecodeError, TransportError

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0

# Query parameters whose values never appear in logs
SENSITIVE_PARAMS = frozenset({"appid", "api_key", "apikey", "key", "token"})


@dataclass(frozen=True)
class HTTPResponse:
    """Fully read HTTP response, detached from the underlying connection."""
    status_code: int
    text: str
    url: str = ""

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            DecodeError: If the body is not valid JSON.
        """
        try:
            return json.loads(self.text)
        except ValueError as exc:
            raise DecodeError(f"Response body is not valid JSON: {exc}") from exc


class HTTPClient(Protocol):
    def get(
        self,
        url: str,
        params: Optional[Mapping[str, str]],
        timeout: Optional[float],
    ) -> HTTPResponse:
        ...


def redact_params(
    params: Optional[Mapping[str, str]],
    sensitive: Sequence[str] = tuple(SENSITIVE_PARAMS),
) -> Dict[str, str]:
    """Return a copy of params safe for logging."""
    if not params:
        return {}
    hidden = {name.lower() for name in sensitive}
    return {
        name: ("***" if name.lower() in hidden else value)
        for name, value in params.items()
    }


class RequestsHTTPClient:
    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._session = session
        self._owns_session = session is None

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self) -> None:
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "RequestsHTTPClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def get(
        self,
        url: str,
        params: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
    ) -> HTTPResponse:
        session = self._get_session()
        response: Optional[requests.Response] = None
        LOGGER.debug("GET %s params=%s", url, redact_params(params))

        try:
            # requests URL-encodes the query parameters
            response = session.get(url, params=params, timeout=timeout)
            return HTTPResponse(
                status_code=response.status_code,
                text=response.text,
                url=url,
            )
        except requests.exceptions.Timeout as exc:
            raise TransportError(
                f"Request timed out after {timeout} seconds while connecting to {url}"
            ) from exc
        except requests.exceptions.ConnectionError as exc:
            raise TransportError(f"Failed to establish connection to {url}") from exc
        except requests.exceptions.RequestException as exc:
            raise TransportError(f"Request to {url} failed: {type(exc).__name__}") from exc
        finally:
            # Release the connection back to the pool
            if response is not None:
                response.close()


__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "HTTPClient",
    "HTTPResponse",
    "RequestsHTTPClient",
    "redact_params",
]
