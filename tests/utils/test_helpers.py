# tests/utils/test_helpers.py
"""Tests for app/utils/helpers.py module."""

import re
from unittest.mock import MagicMock

from fastapi import FastAPI
from starlette.testclient import TestClient

from app.utils.helpers import client_ip, get_summary, host, today_str


def make_request(headers: dict[str, str], peer: str | None = "10.1.2.3") -> MagicMock:
    request = MagicMock()
    request.headers = headers
    if peer is None:
        request.client = None
    else:
        request.client.host = peer
    return request


class TestClientIp:
    def test_prefers_edge_header(self) -> None:
        request = make_request({"CF-Connecting-IP": "192.168.1.1"})
        assert client_ip(request) == "192.168.1.1"

    def test_falls_back_to_peer(self) -> None:
        assert client_ip(make_request({})) == "10.1.2.3"

    def test_unknown_peer(self) -> None:
        assert host(make_request({}, peer=None)) == "unknown"
        assert client_ip(make_request({}, peer=None)) == "unknown"


class TestTodayStr:
    def test_format_matches_expected_pattern(self) -> None:
        """Test that the date format matches YYYY-MM-DD HH:MM:SS."""
        result = today_str()
        pattern = r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$"
        assert re.match(pattern, result), f"Date format mismatch: {result}"


class TestGetSummary:
    def test_returns_route_summary(self) -> None:
        app = FastAPI()
        captured: dict[str, str | None] = {}

        @app.get("/items", summary="List items")
        async def items() -> dict[str, str]:
            return {}

        @app.middleware("http")
        async def capture(request, call_next):  # noqa: ANN001, ANN202
            captured["summary"] = get_summary(request)
            return await call_next(request)

        with TestClient(app) as test_client:
            test_client.get("/items")

        assert captured["summary"] == "List items"

    def test_unknown_path(self) -> None:
        app = FastAPI()
        captured: dict[str, str | None] = {}

        @app.middleware("http")
        async def capture(request, call_next):  # noqa: ANN001, ANN202
            captured["summary"] = get_summary(request)
            return await call_next(request)

        with TestClient(app) as test_client:
            test_client.get("/missing")

        assert captured["summary"] is None
