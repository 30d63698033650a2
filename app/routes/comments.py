# app/routes/comments.py

"""
Comment Routes.

Visitor comments attached to a blog's comment pool. A visitor owns a comment
through the token of the address it was written from.
"""

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Path, Query
from fastapi.responses import ORJSONResponse, PlainTextResponse
from starlette.status import HTTP_501_NOT_IMPLEMENTED

from app.configs import file_logger
from app.dependencies import CommentServiceDep, VisitorTokenDep
from app.errors import BlogError, blog_error_response
from app.schemas import ApiResponse, dump
from app.utils import parse_int_prefix

router = APIRouter(prefix="/api/blog", tags=["💬 Comments"])

logger = file_logger(getLogger(__name__))

BlogId = Annotated[int, Path(ge=0, description="Blog ID (comment pool)")]


def is_visitor_flag(value: str | None) -> bool:
    """Accept `"true"` or anything whose leading integer is 1."""
    return value == "true" or parse_int_prefix(value) == 1


@router.post(
    "/{blog_id}/comments",
    response_class=ORJSONResponse,
    response_model=None,
    summary="Comment on a blog",
    description="Add a visitor comment, optionally as a reply to another comment.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "examples": {
                        "created": {
                            "value": {"success": True, "message": "Commented", "value": 7},
                        },
                        "missing": {"value": {"success": False, "message": "blog not found"}},
                    },
                },
            },
        },
        501: {
            "description": "Account comments are not supported",
            "content": {"text/plain": {"example": "Not implemented"}},
        },
    },
    operation_id="comment_create",
)
async def create_comment(
    blog_id: BlogId,
    value: Annotated[str, Query(min_length=1, description="Comment text")],
    service: CommentServiceDep,
    visitor_token: VisitorTokenDep,
    to: Annotated[str | None, Query(description="Parent comment ID")] = None,
    is_visitor: Annotated[str | None, Query(alias="isVisitor")] = None,
) -> ORJSONResponse | PlainTextResponse:
    """
    Create a comment on a blog.

    Parameters
    ----------
    blog_id : int
        Blog the comment belongs to.
    value : str
        Comment text.
    service : CommentService
        Comment service dependency.
    visitor_token : str
        Encoded caller IP, stored as the comment's owner.
    to : str | None
        Parent comment id; anything non-numeric means top level.
    is_visitor : str | None
        `"true"` or `1` for visitor comments.

    Returns
    -------
    ORJSONResponse | PlainTextResponse
        `{"success": true, "message": "Commented", "value": <id>}`, a negative
        envelope, or plain text `Not implemented` for account comments.
    """
    try:
        db_comment = await service.create_comment(
            blog_id,
            visitor_token,
            value,
            parent=parse_int_prefix(to),
            is_visitor=is_visitor_flag(is_visitor),
        )
    except BlogError as e:
        return blog_error_response(e)
    except NotImplementedError as e:
        return PlainTextResponse(str(e), status_code=HTTP_501_NOT_IMPLEMENTED)

    return ORJSONResponse(dump(ApiResponse(success=True, message="Commented", value=db_comment.id)))


@router.delete(
    "/{blog_id}/comments",
    response_class=ORJSONResponse,
    summary="Delete a visitor comment",
    description="Delete a comment written from the caller's address.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "examples": {
                        "deleted": {"value": {"success": True, "message": "Deleted"}},
                        "missing": {"value": {"success": False, "message": "comment not found"}},
                        "forbidden": {
                            "value": {
                                "success": False,
                                "message": "Not allowed to delete a comment from another user",
                            },
                        },
                    },
                },
            },
        },
    },
    operation_id="comment_delete",
)
async def delete_comment(
    blog_id: BlogId,
    service: CommentServiceDep,
    visitor_token: VisitorTokenDep,
    comment_id: Annotated[str | None, Query(alias="id", description="Comment ID")] = None,
) -> ORJSONResponse:
    """Delete a visitor comment owned by the caller's visitor token."""
    try:
        await service.delete_visitor_comment(blog_id, parse_int_prefix(comment_id), visitor_token)
    except BlogError as e:
        return blog_error_response(e)

    return ORJSONResponse(dump(ApiResponse(success=True, message="Deleted")))
