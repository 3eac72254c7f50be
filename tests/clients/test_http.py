"""Unit tests for the shared HTTP transport."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest
import requests

from weather_cli.clients.http import HTTPResponse, RequestsHTTPClient, redact_params
from weather_cli.clients.openweathermap import CURRENT_WEATHER_ENDPOINT, OpenWeatherMapClient
from weather_cli.errors import DecodeError, TransportError


class TestHTTPResponse:
    def test_ok_only_for_200(self):
        assert HTTPResponse(status_code=200, text="{}").ok is True
        assert HTTPResponse(status_code=201, text="{}").ok is False
        assert HTTPResponse(status_code=404, text="").ok is False

    def test_json_decodes_body(self):
        assert HTTPResponse(status_code=200, text='{"city": "Paris"}').json() == {"city": "Paris"}

    def test_invalid_json_raises_decode_error(self):
        with pytest.raises(DecodeError, match="not valid JSON"):
            HTTPResponse(status_code=200, text="<html>").json()


class TestRedactParams:
    def test_hides_api_key(self):
        assert redact_params({"q": "London", "appid": "secret"}) == {"q": "London", "appid": "***"}

    def test_empty_params(self):
        assert redact_params(None) == {}


class TestRequestsHTTPClient:
    def _session_returning(self, status_code: int, text: str) -> MagicMock:
        session = MagicMock(spec=requests.Session)
        response = MagicMock(spec=requests.Response)
        response.status_code = status_code
        response.text = text
        session.get.return_value = response
        return session

    def test_get_returns_detached_response(self):
        session = self._session_returning(200, '{"ok": true}')
        client = RequestsHTTPClient(session=session)

        result = client.get("https://api.example.com/x", {"q": "Paris"}, 10)

        assert result == HTTPResponse(status_code=200, text='{"ok": true}', url="https://api.example.com/x")
        session.get.assert_called_once_with(
            "https://api.example.com/x", params={"q": "Paris"}, timeout=10
        )
        session.get.return_value.close.assert_called_once()

    def test_location_passed_as_query_param(self, london_payload):
        session = self._session_returning(200, json.dumps(london_payload))
        client = OpenWeatherMapClient(
            api_key="test-key", http_client=RequestsHTTPClient(session=session)
        )

        client.fetch_current("São Paulo, BR")

        args, kwargs = session.get.call_args
        assert args[0] == CURRENT_WEATHER_ENDPOINT
        assert "?" not in args[0]
        assert kwargs["params"] == {"q": "São Paulo, BR", "appid": "test-key"}

        prepared = requests.Request("GET", args[0], params=kwargs["params"]).prepare()
        assert "q=S%C3%A3o+Paulo%2C+BR" in prepared.url

    def test_non_200_is_returned_not_raised(self):
        session = self._session_returning(503, "unavailable")
        client = RequestsHTTPClient(session=session)

        result = client.get("https://api.example.com/x", None, 10)

        assert result.status_code == 503
        assert result.text == "unavailable"

    def test_timeout_raises_transport_error(self):
        session = MagicMock(spec=requests.Session)
        session.get.side_effect = requests.exceptions.Timeout("slow")
        client = RequestsHTTPClient(session=session)

        with pytest.raises(TransportError, match="timed out after 5 seconds"):
            client.get("https://api.example.com/x", None, 5)

    def test_connection_error_raises_transport_error(self):
        session = MagicMock(spec=requests.Session)
        session.get.side_effect = requests.exceptions.ConnectionError("refused")
        client = RequestsHTTPClient(session=session)

        with pytest.raises(TransportError, match="Failed to establish connection"):
            client.get("https://api.example.com/x", None, 5)

    def test_error_message_does_not_leak_params(self):
        session = MagicMock(spec=requests.Session)
        session.get.side_effect = requests.exceptions.ConnectionError(
            "https://api.example.com/x?appid=secret"
        )
        client = RequestsHTTPClient(session=session)

        with pytest.raises(TransportError) as exc_info:
            client.get("https://api.example.com/x", {"appid": "secret"}, 5)

        assert "secret" not in str(exc_info.value)

    def test_injected_session_is_not_closed(self):
        session = MagicMock(spec=requests.Session)
        with RequestsHTTPClient(session=session):
            pass
        session.close.assert_not_called()

    def test_owned_session_is_closed(self):
        client = RequestsHTTPClient()
        session = client._get_session()
        session.close = MagicMock()

        client.close()

        session.close.assert_called_once()
        assert client._session is None
