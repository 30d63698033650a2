# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before app is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_TO_FILE"] = "false"
os.environ["GEMINI_API_KEY"] = ""
os.environ["AI_MAX_RETRIES"] = "2"
os.environ["AI_RETRY_DELAY"] = "0"
os.environ["BLOG_ID_STRATEGY"] = "both"

from collections.abc import AsyncGenerator, Awaitable, Callable
from unittest.mock import AsyncMock, MagicMock

from httpx import ASGITransport, AsyncClient
from pytest import fixture

from app.clients.ai_client import AiClient
from app.db import close_db, init_db
from app.main import app

# Visitor address sent by the test client, and its encoded token
VISITOR_IP = "192.168.1.1"


@fixture
async def db() -> AsyncGenerator[None]:
    """Fresh in-memory database; disposing the engine drops it."""
    await init_db()
    yield
    await close_db()


@fixture
def mock_ai_client() -> MagicMock:
    """AI client stand-in that answers every prompt with a fixed summary."""
    ai_client = MagicMock(spec=AiClient)
    ai_client.client = MagicMock()
    ai_client.generate_text = AsyncMock(return_value="这篇文章讲了春日影。")
    return ai_client


@fixture
async def client(db: None, mock_ai_client: MagicMock) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing FastAPI endpoints."""
    app.state.ai_client = mock_ai_client
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
        headers={"CF-Connecting-IP": VISITOR_IP},
    ) as ac:
        yield ac
    del app.state.ai_client


@fixture
def bind_blog(client: AsyncClient) -> Callable[..., Awaitable[int]]:
    """Return a helper that binds a post link through the API and returns the blog id."""

    async def _bind(post_link: str = "/posts/hello", title: str = "Hello") -> int:
        response = await client.post(
            "/api/blog/bind_new",
            params={"post_link": post_link, "title": title},
        )
        assert response.json()["success"] is True
        return response.json()["value"][0]["id"]

    return _bind
