# tests/routes/test_comment_routes.py
"""Tests for the visitor comment routes in app/routes/comments.py."""

from collections.abc import Awaitable, Callable

from httpx import AsyncClient
from pytest import mark

BindBlog = Callable[..., Awaitable[int]]


async def comment(client: AsyncClient, blog_id: int, value: str = "春日影", **params: str) -> dict:
    response = await client.post(
        f"/api/blog/{blog_id}/comments",
        params={"isVisitor": "1", "value": value, **params},
    )
    return response.json()


@mark.asyncio
async def test_create_visitor_comment(client: AsyncClient, bind_blog: BindBlog) -> None:
    blog_id = await bind_blog()

    data = await comment(client, blog_id)

    assert data["success"] is True
    assert data["message"] == "Commented"
    assert isinstance(data["value"], int)

    context = (await client.get(f"/api/blog/{blog_id}/context")).json()
    assert len(context["comments"]) == 1
    stored = context["comments"][0]
    assert stored["id"] == data["value"]
    assert stored["commentPool"] == blog_id
    assert stored["isVisitor"] is True
    assert stored["visitorIp"] == "mvrkm"
    assert stored["value"] == "春日影"
    assert stored["parent"] is None
    assert stored["user"] is None
    assert stored["createdAt"]


@mark.asyncio
async def test_visitor_flag_accepts_true(client: AsyncClient, bind_blog: BindBlog) -> None:
    blog_id = await bind_blog()

    data = await comment(client, blog_id, isVisitor="true")

    assert data["success"] is True


@mark.asyncio
async def test_reply_records_parent(client: AsyncClient, bind_blog: BindBlog) -> None:
    blog_id = await bind_blog()
    parent_id = (await comment(client, blog_id, "first"))["value"]

    await comment(client, blog_id, "reply", to=str(parent_id))
    await comment(client, blog_id, "top level", to="abc")

    comments = (await client.get(f"/api/blog/{blog_id}/context")).json()["comments"]
    assert [c["value"] for c in comments] == ["first", "reply", "top level"]
    assert comments[1]["parent"] == parent_id
    assert comments[2]["parent"] is None


@mark.asyncio
async def test_non_visitor_comment_not_implemented(
    client: AsyncClient,
    bind_blog: BindBlog,
) -> None:
    blog_id = await bind_blog()

    response = await client.post(
        f"/api/blog/{blog_id}/comments",
        params={"isVisitor": "0", "value": "hi"},
    )

    assert response.status_code == 501
    assert response.text == "Not implemented"
    context = (await client.get(f"/api/blog/{blog_id}/context")).json()
    assert context["comments"] == []


@mark.asyncio
async def test_comment_on_missing_blog(client: AsyncClient) -> None:
    data = await comment(client, 404)

    assert data == {"success": False, "message": "blog not found"}


@mark.asyncio
async def test_delete_own_comment(client: AsyncClient, bind_blog: BindBlog) -> None:
    blog_id = await bind_blog()
    comment_id = (await comment(client, blog_id))["value"]

    response = await client.delete(f"/api/blog/{blog_id}/comments", params={"id": comment_id})

    assert response.json() == {"success": True, "message": "Deleted"}
    context = (await client.get(f"/api/blog/{blog_id}/context")).json()
    assert context["comments"] == []


@mark.asyncio
async def test_delete_comment_from_another_ip(client: AsyncClient, bind_blog: BindBlog) -> None:
    blog_id = await bind_blog()
    comment_id = (await comment(client, blog_id))["value"]

    response = await client.delete(
        f"/api/blog/{blog_id}/comments",
        params={"id": comment_id},
        headers={"CF-Connecting-IP": "10.0.0.2"},
    )

    assert response.json() == {
        "success": False,
        "message": "Not allowed to delete a comment from another user",
    }
    context = (await client.get(f"/api/blog/{blog_id}/context")).json()
    assert len(context["comments"]) == 1


@mark.asyncio
async def test_delete_missing_comment(client: AsyncClient, bind_blog: BindBlog) -> None:
    blog_id = await bind_blog()

    for params in ({"id": "999"}, {"id": "abc"}, {}):
        response = await client.delete(f"/api/blog/{blog_id}/comments", params=params)
        assert response.json() == {"success": False, "message": "comment not found"}


@mark.asyncio
async def test_delete_comment_through_other_blog(
    client: AsyncClient,
    bind_blog: BindBlog,
) -> None:
    blog_id = await bind_blog("/posts/one")
    other_id = await bind_blog("/posts/two")
    comment_id = (await comment(client, blog_id))["value"]

    response = await client.delete(f"/api/blog/{other_id}/comments", params={"id": comment_id})

    assert response.json() == {"success": False, "message": "comment not found"}


@mark.asyncio
async def test_deleting_blog_keeps_comments(client: AsyncClient) -> None:
    await client.post("/api/blog/42/context", json={"post_link": "/posts/kept"})
    await comment(client, 42, "still here")

    await client.delete("/api/blog/42/context")
    await client.post("/api/blog/42/context", json={"post_link": "/posts/kept"})

    context = (await client.get("/api/blog/42/context")).json()
    assert [c["value"] for c in context["comments"]] == ["still here"]


@mark.asyncio
async def test_comment_ids_beyond_integer_column(
    client: AsyncClient,
    bind_blog: BindBlog,
) -> None:
    blog_id = await bind_blog()

    data = await comment(client, blog_id, "top level", to="9" * 20)
    assert data["success"] is True

    context = (await client.get(f"/api/blog/{blog_id}/context")).json()
    assert context["comments"][0]["parent"] is None

    response = await client.delete(f"/api/blog/{blog_id}/comments", params={"id": "9" * 20})
    assert response.json() == {"success": False, "message": "comment not found"}

    data = await comment(client, int("9" * 20))
    assert data == {"success": False, "message": "blog not found"}


@mark.asyncio
async def test_delete_comment_with_replies(client: AsyncClient, bind_blog: BindBlog) -> None:
    blog_id = await bind_blog()
    parent_id = (await comment(client, blog_id, "first"))["value"]
    await comment(client, blog_id, "reply", to=str(parent_id))

    response = await client.delete(f"/api/blog/{blog_id}/comments", params={"id": parent_id})

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert data["message"].startswith("Database integrity error")
    assert "FOREIGN KEY" in data["message"]
    context = (await client.get(f"/api/blog/{blog_id}/context")).json()
    assert [c["value"] for c in context["comments"]] == ["first", "reply"]
