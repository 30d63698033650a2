"""
Negative outcomes of blog operations.

These are ordinary results rather than failures: the routes catch them and
answer HTTP 200 with `{success: false, message}`. Clients tell them apart by
message text only, so the messages are part of the wire contract.
"""

from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_200_OK

from app.errors.base import BaseAppError, error_envelope

BLOG_NOT_FOUND = "blog not found"
BLOG_EXISTS = "blog already exists"
ALREADY_LIKED = "Already liked"
COMMENT_NOT_FOUND = "comment not found"
COMMENT_FORBIDDEN = "Not allowed to delete a comment from another user"
SUMMARY_EXISTS = "there already exists a summary"
NO_CONTENT = "No content"


class BlogError(BaseAppError):
    """Base class for negative blog outcomes."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail, HTTP_200_OK)


class BlogNotFoundError(BlogError):
    def __init__(self, detail: str = BLOG_NOT_FOUND) -> None:
        super().__init__(detail)


class BlogExistsError(BlogError):
    def __init__(self, detail: str = BLOG_EXISTS) -> None:
        super().__init__(detail)


class AlreadyLikedError(BlogError):
    def __init__(self, detail: str = ALREADY_LIKED) -> None:
        super().__init__(detail)


class CommentNotFoundError(BlogError):
    def __init__(self, detail: str = COMMENT_NOT_FOUND) -> None:
        super().__init__(detail)


class CommentForbiddenError(BlogError):
    """The caller's token does not match the comment's visitor token."""

    def __init__(self, detail: str = COMMENT_FORBIDDEN) -> None:
        super().__init__(detail)


class SummaryExistsError(BlogError):
    def __init__(self, detail: str = SUMMARY_EXISTS) -> None:
        super().__init__(detail)


class EmptyContentError(BlogError):
    def __init__(self, detail: str = NO_CONTENT) -> None:
        super().__init__(detail)


def blog_error_response(error: BlogError) -> ORJSONResponse:
    """Render a negative outcome as the failure envelope."""
    return ORJSONResponse(content=error_envelope(error.detail), status_code=error.status_code)
