# tests/main/test_main.py
"""Tests for the application wiring in app/main.py."""

from unittest.mock import MagicMock

from httpx import ASGITransport, AsyncClient
from pytest import MonkeyPatch, mark

from app.main import app
from app.services import BlogService


@mark.asyncio
async def test_root_endpoint(client: AsyncClient) -> None:
    """Test root endpoint."""
    response = await client.get("/")
    assert response.status_code == 200
    assert response.text == "Hello World from Dynablog"


@mark.asyncio
@mark.parametrize("method", ["GET", "POST", "PUT", "DELETE"])
async def test_ping(client: AsyncClient, method: str) -> None:
    response = await client.request(method, "/api/ping")
    assert response.status_code == 200
    assert response.text == "pong"


@mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    """Test health check endpoint."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == app.version
    assert "timestamp" in data
    assert data["services"] == {"database": "ok", "ai_client": "initialized"}


@mark.asyncio
async def test_health_check_without_ai_key(
    client: AsyncClient,
    mock_ai_client: MagicMock,
) -> None:
    mock_ai_client.client = None
    response = await client.get("/health")
    assert response.json()["services"]["ai_client"] == "not_initialized"


@mark.asyncio
async def test_unknown_route(client: AsyncClient) -> None:
    response = await client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found"}


@mark.asyncio
async def test_security_headers(client: AsyncClient) -> None:
    response = await client.get("/api/ping")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


@mark.asyncio
async def test_cors_allows_blog_origin(client: AsyncClient) -> None:
    response = await client.get("/api/ping", headers={"Origin": "https://nickchen.top"})
    assert response.headers["access-control-allow-origin"] == "https://nickchen.top"


@mark.asyncio
async def test_cors_rejects_unknown_origin(client: AsyncClient) -> None:
    response = await client.get("/api/ping", headers={"Origin": "https://evil.example"})
    assert "access-control-allow-origin" not in response.headers


@mark.asyncio
async def test_cors_only_covers_api_routes(client: AsyncClient) -> None:
    origin = {"Origin": "https://nickchen.top"}

    response = await client.get("/", headers=origin)
    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers

    response = await client.get("/health", headers=origin)
    assert "access-control-allow-origin" not in response.headers


@mark.asyncio
async def test_cors_preflight_for_api_route(client: AsyncClient) -> None:
    response = await client.options(
        "/api/blog/1/like",
        headers={
            "Origin": "https://nickchen.top",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://nickchen.top"


@mark.asyncio
async def test_unhandled_error_returns_envelope(db: None, monkeypatch: MonkeyPatch) -> None:
    async def broken(self: BlogService, post_link: str) -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr(BlogService, "find_by_link", broken)

    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app, raise_app_exceptions=False),
    ) as ac:
        response = await ac.get("/api/blog/context", params={"path": "/posts/hello"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Internal Server Error"}
