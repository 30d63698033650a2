"""Validation, HTTP and fallback error handling for FastAPI."""

from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_422_UNPROCESSABLE_CONTENT, HTTP_500_INTERNAL_SERVER_ERROR

from app.configs import file_logger
from app.configs.settings import DEFAULT_ERROR_MESSAGE
from app.errors.base import error_envelope
from app.utils.helpers import host

logger = file_logger(getLogger(__name__))


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle Pydantic validation errors with the standard failure envelope.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)

    formatted_errors = []
    for error in exec_error.errors():
        formatted_error = {
            "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),  # Skip 'body'/'query'
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        if "input" in error:
            formatted_error["input"] = error["input"]
        formatted_errors.append(formatted_error)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_422_UNPROCESSABLE_CONTENT,
        content=error_envelope("Validation failed", errors=formatted_errors),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Report anything that escaped the handlers without leaking internals."""
    logger.exception(
        f"Unhandled error for ip: {host(request)} at endpoint {request.url.path}",
        exc_info=exc,
    )
    return ORJSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope(DEFAULT_ERROR_MESSAGE),
    )


async def http_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Answer routing errors (unknown path, disabled route) with the failure envelope."""
    http_error = cast(StarletteHTTPException, exc)
    logger.info(
        f"{http_error.status_code} for ip: {host(request)} at endpoint {request.url.path}",
    )
    return ORJSONResponse(
        status_code=http_error.status_code,
        content=error_envelope(str(http_error.detail)),
        headers=http_error.headers,
    )
