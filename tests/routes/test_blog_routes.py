# tests/routes/test_blog_routes.py
"""Tests for the blog routes in app/routes/blog.py."""

from collections.abc import Awaitable, Callable

from httpx import AsyncClient
from pytest import MonkeyPatch, mark

from app.configs import settings

BindBlog = Callable[..., Awaitable[int]]


@mark.asyncio
async def test_bind_new_creates_blog(client: AsyncClient) -> None:
    response = await client.post(
        "/api/blog/bind_new",
        params={"post_link": "/posts/hello", "title": "Hello"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert len(data["value"]) == 1
    blog = data["value"][0]
    assert isinstance(blog["id"], int)
    assert blog["title"] == "Hello"
    assert blog["postLink"] == "/posts/hello"
    assert blog["likes"] == ""
    assert blog["aiSummary"] is None


@mark.asyncio
async def test_bind_new_duplicate_link(client: AsyncClient, bind_blog: BindBlog) -> None:
    await bind_blog("/posts/hello")

    response = await client.post("/api/blog/bind_new", params={"post_link": "/posts/hello"})

    assert response.status_code == 200
    assert response.json() == {"success": False, "message": "blog already exists"}


@mark.asyncio
async def test_bind_new_requires_post_link(client: AsyncClient) -> None:
    response = await client.post("/api/blog/bind_new", params={"title": "No link"})

    assert response.status_code == 422
    data = response.json()
    assert data["success"] is False
    assert data["message"] == "Validation failed"
    assert data["errors"][0]["field"] == "post_link"


@mark.asyncio
async def test_lookup_by_path(client: AsyncClient, bind_blog: BindBlog) -> None:
    blog_id = await bind_blog("/posts/hello", "Hello")

    response = await client.get("/api/blog/context", params={"path": "/posts/hello"})

    assert response.status_code == 200
    data = response.json()
    assert data["exist"] is True
    assert data["blog"]["id"] == blog_id
    assert data["blog"]["postLink"] == "/posts/hello"


@mark.asyncio
async def test_lookup_by_path_missing(client: AsyncClient) -> None:
    response = await client.get("/api/blog/context", params={"path": "/posts/nope"})

    assert response.status_code == 200
    assert response.json() == {"exist": False, "message": "blog not found"}


@mark.asyncio
async def test_create_with_explicit_id(client: AsyncClient) -> None:
    response = await client.post(
        "/api/blog/860213/context",
        json={"title": "测试", "post_link": "/example"},
    )

    data = response.json()
    assert data["success"] is True
    assert data["value"][0]["id"] == 860213
    assert data["value"][0]["title"] == "测试"
    assert data["value"][0]["postLink"] == "/example"


@mark.asyncio
async def test_create_with_explicit_id_defaults_link_to_request_path(client: AsyncClient) -> None:
    response = await client.post("/api/blog/5/context")

    data = response.json()
    assert data["success"] is True
    assert data["value"][0]["postLink"] == "/api/blog/5/context"
    assert data["value"][0]["title"] is None


@mark.asyncio
async def test_create_with_taken_id(client: AsyncClient) -> None:
    await client.post("/api/blog/7/context", json={"post_link": "/first"})

    response = await client.post("/api/blog/7/context", json={"post_link": "/second"})

    assert response.json() == {"success": False, "message": "blog already exists"}


@mark.asyncio
async def test_get_context_without_comments(client: AsyncClient, bind_blog: BindBlog) -> None:
    blog_id = await bind_blog("/posts/hello", "Hello")

    response = await client.get(f"/api/blog/{blog_id}/context")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == blog_id
    assert data["title"] == "Hello"
    assert data["postLink"] == "/posts/hello"
    assert data["comments"] == []


@mark.asyncio
async def test_get_context_missing(client: AsyncClient) -> None:
    response = await client.get("/api/blog/404/context")

    assert response.status_code == 200
    assert response.json() == {"success": False, "message": "blog not found"}


@mark.asyncio
async def test_get_context_rejects_non_numeric_id(client: AsyncClient) -> None:
    response = await client.get("/api/blog/abc/context")

    assert response.status_code == 422
    assert response.json()["success"] is False


@mark.asyncio
async def test_delete_blog(client: AsyncClient, bind_blog: BindBlog) -> None:
    blog_id = await bind_blog()

    response = await client.delete(f"/api/blog/{blog_id}/context")
    assert response.json() == {"success": True, "message": "Deleted"}

    response = await client.get(f"/api/blog/{blog_id}/context")
    assert response.json() == {"success": False, "message": "blog not found"}


@mark.asyncio
async def test_delete_missing_blog(client: AsyncClient) -> None:
    response = await client.delete("/api/blog/404/context")

    assert response.json() == {"success": False, "message": "blog not found"}


@mark.asyncio
async def test_auto_route_disabled_by_strategy(
    client: AsyncClient,
    monkeypatch: MonkeyPatch,
) -> None:
    monkeypatch.setattr(settings, "BLOG_ID_STRATEGY", "explicit")

    response = await client.post("/api/blog/bind_new", params={"post_link": "/posts/hello"})

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not found"}


@mark.asyncio
async def test_explicit_route_disabled_by_strategy(
    client: AsyncClient,
    monkeypatch: MonkeyPatch,
) -> None:
    monkeypatch.setattr(settings, "BLOG_ID_STRATEGY", "auto")

    response = await client.post("/api/blog/1/context", json={"post_link": "/posts/hello"})

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not found"}


@mark.asyncio
async def test_ids_beyond_integer_column(client: AsyncClient) -> None:
    huge_id = "9" * 20

    response = await client.get(f"/api/blog/{huge_id}/context")
    assert response.status_code == 200
    assert response.json() == {"success": False, "message": "blog not found"}

    response = await client.delete(f"/api/blog/{huge_id}/context")
    assert response.status_code == 200
    assert response.json() == {"success": False, "message": "blog not found"}


@mark.asyncio
async def test_create_with_id_beyond_integer_column(client: AsyncClient) -> None:
    response = await client.post(f"/api/blog/{1 << 31}/context", json={"post_link": "/big"})

    assert response.status_code == 422
    assert response.json()["success"] is False
