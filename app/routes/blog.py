# app/routes/blog.py

"""
Blog Routes.

Blog records keyed by the static site's post links, and their like lists.

Summary
-------
Endpoints include:
  - Look up a blog by post link
  - Get a blog with its comments
  - Bind a new post link (generated id)
  - Create a blog with an explicit id
  - Delete a blog
  - Like a blog

Negative outcomes (missing blog, duplicate link, repeated like) answer HTTP 200
with `{"success": false, "message": ...}`; clients branch on `success`.
"""

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, Query, Request
from fastapi.responses import ORJSONResponse

from app.configs import file_logger
from app.dependencies import BlogServiceDep, VisitorTokenDep, require_id_strategy
from app.errors import BlogError, blog_error_response
from app.errors.blog import BLOG_NOT_FOUND
from app.repositories import MAX_ID
from app.schemas import (
    ApiResponse,
    BlogContextResponse,
    BlogCreateBody,
    BlogLookupResponse,
    BlogResponse,
    CommentResponse,
    LikeResponse,
    dump,
)

router = APIRouter(prefix="/api/blog", tags=["📝 Blogs"])

logger = file_logger(getLogger(__name__))

BlogId = Annotated[int, Path(ge=0, description="Blog ID")]
NewBlogId = Annotated[int, Path(ge=0, le=MAX_ID, description="Blog ID")]

NOT_FOUND_EXAMPLE = {"success": False, "message": BLOG_NOT_FOUND}


def created_response(blog: BlogResponse) -> ORJSONResponse:
    # `value` is a list of inserted rows
    return ORJSONResponse(dump(ApiResponse(success=True, value=[dump(blog)])))


@router.get(
    "/context",
    response_class=ORJSONResponse,
    summary="Look up a blog by post link",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "exist": True,
                        "blog": {
                            "id": 1,
                            "title": "Hello",
                            "postLink": "/posts/hello",
                            "likes": "",
                            "aiSummary": None,
                        },
                    },
                },
            },
        },
    },
    operation_id="blog_lookup_by_link",
)
async def get_blog_by_link(
    path: Annotated[str, Query(description="Post link")],
    service: BlogServiceDep,
) -> ORJSONResponse:
    """
    Look up a blog by its post link.

    Parameters
    ----------
    path : str
        Post link as bound with `/api/blog/bind_new`.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    ORJSONResponse
        `{"exist": true, "blog": ...}` or `{"exist": false, "message": "blog not found"}`.
    """
    db_blog = await service.find_by_link(path)
    if db_blog is None:
        return ORJSONResponse(dump(BlogLookupResponse(exist=False, message=BLOG_NOT_FOUND)))

    blog = BlogResponse.model_validate(db_blog, from_attributes=True)
    return ORJSONResponse(dump(BlogLookupResponse(exist=True, blog=blog)))


@router.get(
    "/{blog_id}/context",
    response_class=ORJSONResponse,
    summary="Get a blog with its comments",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "id": 1,
                        "title": "Hello",
                        "postLink": "/posts/hello",
                        "likes": "mvrkm",
                        "aiSummary": None,
                        "comments": [
                            {
                                "id": 3,
                                "commentPool": 1,
                                "parent": None,
                                "user": None,
                                "isVisitor": True,
                                "visitorIp": "mvrkm",
                                "value": "春日影",
                                "createdAt": "2025-01-01T00:00:00Z",
                                "likes": "",
                            },
                        ],
                    },
                },
            },
        },
    },
    operation_id="blog_get_context",
)
async def get_blog_context(blog_id: BlogId, service: BlogServiceDep) -> ORJSONResponse:
    """
    Get a blog row with every comment of its comment pool.

    Parameters
    ----------
    blog_id : int
        Blog identifier.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    ORJSONResponse
        The blog with a nested `comments` array, or the not-found envelope.
    """
    # TODO: accept limit/offset once the comment list gets long enough to matter
    try:
        db_blog, db_comments = await service.get_context(blog_id)
    except BlogError as e:
        return blog_error_response(e)

    blog = BlogResponse.model_validate(db_blog, from_attributes=True)
    context = BlogContextResponse(
        **blog.model_dump(),
        comments=[CommentResponse.model_validate(c, from_attributes=True) for c in db_comments],
    )
    return ORJSONResponse(dump(context))


@router.post(
    "/bind_new",
    response_class=ORJSONResponse,
    summary="Bind a post link to a new blog",
    description="Create a blog with a generated id for a post link.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "examples": {
                        "created": {
                            "value": {
                                "success": True,
                                "value": [
                                    {
                                        "id": 1,
                                        "title": "Hello",
                                        "postLink": "/posts/hello",
                                        "likes": "",
                                        "aiSummary": None,
                                    },
                                ],
                            },
                        },
                        "duplicate": {
                            "value": {"success": False, "message": "blog already exists"},
                        },
                    },
                },
            },
        },
    },
    dependencies=[Depends(require_id_strategy("auto"))],
    operation_id="blog_bind_new",
)
async def bind_new_blog(
    post_link: Annotated[str, Query(min_length=1, description="Post link")],
    service: BlogServiceDep,
    title: Annotated[str | None, Query(description="Post title")] = None,
) -> ORJSONResponse:
    """
    Bind a post link to a new blog record with a generated id.

    Parameters
    ----------
    post_link : str
        Unique post link.
    service : BlogService
        Blog service dependency.
    title : str | None
        Post title.

    Returns
    -------
    ORJSONResponse
        `{"success": true, "value": [blog]}` or `{"success": false, "message": "blog already exists"}`.
    """
    try:
        db_blog = await service.bind(post_link, title=title)
    except BlogError as e:
        return blog_error_response(e)

    return created_response(BlogResponse.model_validate(db_blog, from_attributes=True))


@router.post(
    "/{blog_id}/context",
    response_class=ORJSONResponse,
    summary="Create a blog with an explicit id",
    description=(
        "Create a blog whose id is chosen by the caller. The post link comes from the "
        "body, or is the request path when the body omits it."
    ),
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"success": False, "message": "blog already exists"},
                },
            },
        },
    },
    dependencies=[Depends(require_id_strategy("explicit"))],
    operation_id="blog_create_with_id",
)
async def create_blog_with_id(
    request: Request,
    blog_id: NewBlogId,
    service: BlogServiceDep,
    body: Annotated[BlogCreateBody | None, Body()] = None,
) -> ORJSONResponse:
    """
    Create a blog with a caller-supplied id.

    Parameters
    ----------
    request : Request
        Current request context, its path is the fallback post link.
    blog_id : int
        Explicit blog identifier.
    service : BlogService
        Blog service dependency.
    body : BlogCreateBody | None
        Optional title and post link.

    Returns
    -------
    ORJSONResponse
        `{"success": true, "value": [blog]}` or the duplicate envelope.
    """
    body = body or BlogCreateBody()
    post_link = body.post_link or request.url.path

    try:
        db_blog = await service.bind(post_link, title=body.title, blog_id=blog_id)
    except BlogError as e:
        return blog_error_response(e)

    return created_response(BlogResponse.model_validate(db_blog, from_attributes=True))


@router.delete(
    "/{blog_id}/context",
    response_class=ORJSONResponse,
    summary="Delete a blog",
    description="Delete a blog record. Its comments are not removed.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "examples": {
                        "deleted": {"value": {"success": True, "message": "Deleted"}},
                        "missing": {"value": NOT_FOUND_EXAMPLE},
                    },
                },
            },
        },
    },
    operation_id="blog_delete",
)
async def delete_blog(blog_id: BlogId, service: BlogServiceDep) -> ORJSONResponse:
    """Delete a blog record, leaving its comments in place."""
    try:
        await service.delete(blog_id)
    except BlogError as e:
        return blog_error_response(e)

    return ORJSONResponse(dump(ApiResponse(success=True, message="Deleted")))


@router.post(
    "/{blog_id}/like",
    response_class=ORJSONResponse,
    summary="Like a blog",
    description="Add the caller's visitor token to the blog's like list.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "examples": {
                        "liked": {"value": {"success": True, "message": "Liked", "new_likes": 3}},
                        "repeated": {"value": {"success": False, "message": "Already liked"}},
                        "missing": {"value": NOT_FOUND_EXAMPLE},
                    },
                },
            },
        },
    },
    operation_id="blog_like",
)
async def like_blog(
    blog_id: BlogId,
    service: BlogServiceDep,
    visitor_token: VisitorTokenDep,
) -> ORJSONResponse:
    """
    Like a blog once per visitor token.

    Parameters
    ----------
    blog_id : int
        Blog identifier.
    service : BlogService
        Blog service dependency.
    visitor_token : str
        Encoded caller IP.

    Returns
    -------
    ORJSONResponse
        `{"success": true, "message": "Liked", "new_likes": <count>}` or a negative envelope.
    """
    try:
        new_likes = await service.like(blog_id, visitor_token)
    except BlogError as e:
        return blog_error_response(e)

    return ORJSONResponse(dump(LikeResponse(success=True, message="Liked", new_likes=new_likes)))
