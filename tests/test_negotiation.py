"""Tests for siteredirect.server.negotiation — view values to Responses."""

import json

import pytest

from siteredirect.errors import ConfigurationError
from siteredirect.http.response import Redirect, Response
from siteredirect.server.negotiation import json_response, negotiate


class TestNegotiate:
    def test_response_passthrough(self) -> None:
        resp = Response("hi", status=418)
        assert negotiate(resp) is resp

    def test_redirect(self) -> None:
        resp = negotiate(Redirect("https://a.example/x?y=1"))
        assert resp.status == 301
        assert resp.location == "https://a.example/x?y=1"
        assert resp.body == ""

    def test_redirect_status_kept(self) -> None:
        resp = negotiate(Redirect("https://a.example", status=308))
        assert resp.status == 308
        assert resp.headers == (("Location", "https://a.example"),)

    def test_dict_is_compact_json(self) -> None:
        resp = negotiate({"status": "healthy", "sites": 2})
        assert resp.status == 200
        assert resp.content_type == "application/json; charset=utf-8"
        assert resp.text == '{"status":"healthy","sites":2}'

    def test_list(self) -> None:
        assert negotiate(["site1"]).json() == ["site1"]

    def test_status_tuple(self) -> None:
        resp = negotiate(({"error": "Route not found"}, 404))
        assert resp.status == 404
        assert resp.json() == {"error": "Route not found"}

    def test_three_tuple_unsupported(self) -> None:
        with pytest.raises(ConfigurationError):
            negotiate(({}, 404, {"X-A": "1"}))

    def test_unsupported_value(self) -> None:
        with pytest.raises(ConfigurationError, match="int"):
            negotiate(42)


class TestJSONResponse:
    def test_status(self) -> None:
        resp = json_response({"error": "Internal Server Error"}, 500)
        assert resp.status == 500
        assert json.loads(resp.body) == {"error": "Internal Server Error"}

    def test_non_ascii_escaped(self) -> None:
        resp = json_response({"target": "https://ü.example"})
        assert resp.json() == {"target": "https://ü.example"}
