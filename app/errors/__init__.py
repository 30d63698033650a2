from app.errors.ai import (
    AiAuthenticationError,
    AiConfigurationError,
    AiError,
    AIGenerationError,
    AiNetworkError,
    AiQuotaExceededError,
    ai_exception_handler,
)
from app.errors.base import BaseAppError, create_exception_handler, error_envelope
from app.errors.blog import (
    AlreadyLikedError,
    BlogError,
    BlogExistsError,
    BlogNotFoundError,
    CommentForbiddenError,
    CommentNotFoundError,
    EmptyContentError,
    SummaryExistsError,
    blog_error_response,
)
from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    database_exception_handler,
)
from app.errors.validation import (
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "AIGenerationError",
    "AiAuthenticationError",
    "AiConfigurationError",
    "AiError",
    "AiNetworkError",
    "AiQuotaExceededError",
    "AlreadyLikedError",
    "BaseAppError",
    "BlogError",
    "BlogExistsError",
    "BlogNotFoundError",
    "CommentForbiddenError",
    "CommentNotFoundError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "EmptyContentError",
    "SummaryExistsError",
    "ai_exception_handler",
    "blog_error_response",
    "create_exception_handler",
    "database_exception_handler",
    "error_envelope",
    "http_exception_handler",
    "unhandled_exception_handler",
    "validation_exception_handler",
]
