# tests/errors/test_base.py
"""Tests for app/errors/base.py and the blog outcome envelope."""

from unittest.mock import MagicMock

import pytest

from app.errors import (
    AlreadyLikedError,
    BaseAppError,
    BlogNotFoundError,
    CommentForbiddenError,
    DuplicateEntryError,
    blog_error_response,
    create_exception_handler,
    error_envelope,
)


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        """Test default initialization values."""
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500

    def test_custom_values(self) -> None:
        """Test custom initialization values."""
        error = BaseAppError(detail="Custom error", status_code=400)
        assert error.detail == "Custom error"
        assert error.status_code == 400

    def test_str_representation(self) -> None:
        """Test string representation returns message."""
        error = BaseAppError(detail="Test error")
        assert str(error) == "Test error"

    def test_duplicate_entry_is_conflict(self) -> None:
        assert DuplicateEntryError().status_code == 409


class TestBlogErrors:
    """Negative blog outcomes are successful HTTP responses."""

    def test_messages(self) -> None:
        assert BlogNotFoundError().detail == "blog not found"
        assert AlreadyLikedError().detail == "Already liked"
        assert CommentForbiddenError().detail == "Not allowed to delete a comment from another user"

    def test_status_is_ok(self) -> None:
        assert BlogNotFoundError().status_code == 200

    def test_response_body(self) -> None:
        response = blog_error_response(AlreadyLikedError())
        assert response.status_code == 200
        assert response.body == b'{"success":false,"message":"Already liked"}'


def test_error_envelope_extra_fields() -> None:
    assert error_envelope("Validation failed", errors=[]) == {
        "success": False,
        "message": "Validation failed",
        "errors": [],
    }


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    @pytest.mark.asyncio
    async def test_handler_with_base_app_error(self) -> None:
        """Test handler with BaseAppError exception."""
        logger = MagicMock()
        handler = create_exception_handler(logger)

        # Create mock request
        request = MagicMock()
        request.client.host = "192.168.1.1"
        request.url.path = "/api/test"

        error = BaseAppError(detail="Test error", status_code=400)

        response = await handler(request, error)

        assert response.status_code == 400
        assert response.body == b'{"success":false,"message":"Test error"}'

        logger.warning.assert_called_once_with(
            "Test error for ip: 192.168.1.1 for endpoint /api/test",
        )

    @pytest.mark.asyncio
    async def test_handler_with_plain_exception(self) -> None:
        """Exceptions without detail fall back to the generic message."""
        handler = create_exception_handler(MagicMock())
        request = MagicMock()
        request.client.host = "10.0.0.1"
        request.url.path = "/api/test"

        response = await handler(request, ValueError("hidden"))

        assert response.status_code == 500
        assert response.body == b'{"success":false,"message":"Internal Server Error"}'
