# app/routes/summary.py

"""
AI Summary Routes.

Build-time hook that asks the text-generation model for a post summary once,
and lets the stored summary be cleared so the next build regenerates it.
"""

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Body, Path
from fastapi.responses import ORJSONResponse

from app.configs import file_logger
from app.dependencies import SummaryServiceDep
from app.errors import BlogError, blog_error_response
from app.schemas import ApiResponse, SummaryRequest, dump

router = APIRouter(prefix="/api/blog", tags=["🤖 AI Summary"])

logger = file_logger(getLogger(__name__))

BlogId = Annotated[int, Path(ge=0, description="Blog ID")]


@router.post(
    "/{blog_id}/onBuild/genAISummary",
    response_class=ORJSONResponse,
    summary="Generate an AI summary",
    description="Summarize the post content and store it, unless a summary already exists.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "examples": {
                        "generated": {
                            "value": {
                                "success": True,
                                "message": "Summary generated",
                                "value": "这篇文章介绍了……",
                            },
                        },
                        "exists": {
                            "value": {
                                "success": False,
                                "message": "there already exists a summary",
                            },
                        },
                        "empty": {"value": {"success": False, "message": "No content"}},
                    },
                },
            },
        },
        429: {"description": "AI quota exceeded"},
        502: {"description": "AI returned no text"},
        503: {"description": "AI unavailable or not configured"},
    },
    operation_id="summary_generate",
)
async def generate_summary(
    blog_id: BlogId,
    service: SummaryServiceDep,
    body: Annotated[SummaryRequest | None, Body()] = None,
) -> ORJSONResponse:
    """
    Generate and store the AI summary of a blog.

    Parameters
    ----------
    blog_id : int
        Blog identifier.
    service : SummaryService
        Summary service dependency.
    body : SummaryRequest | None
        Raw post content.

    Returns
    -------
    ORJSONResponse
        `{"success": true, "message": "Summary generated", "value": <summary>}`
        or a negative envelope. Model failures are answered by the AI error handler.
    """
    content = body.content if body else None

    try:
        summary = await service.generate(blog_id, content)
    except BlogError as e:
        return blog_error_response(e)

    return ORJSONResponse(
        dump(ApiResponse(success=True, message="Summary generated", value=summary)),
    )


@router.delete(
    "/{blog_id}/onBuild/genAISummary",
    response_class=ORJSONResponse,
    summary="Clear the AI summary",
    operation_id="summary_delete",
)
async def delete_summary(blog_id: BlogId, service: SummaryServiceDep) -> ORJSONResponse:
    """Clear a blog's summary so the next build generates a new one."""
    try:
        await service.delete(blog_id)
    except BlogError as e:
        return blog_error_response(e)

    return ORJSONResponse(dump(ApiResponse(success=True, message="Deleted")))
