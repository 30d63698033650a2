from app.schemas.blog import (
    ApiResponse,
    BlogContextResponse,
    BlogCreateBody,
    BlogLookupResponse,
    BlogResponse,
    CommentResponse,
    LikeResponse,
    SummaryRequest,
    dump,
)
from app.schemas.health import HealthCheckResponse, ServicesStatus

__all__ = [
    "ApiResponse",
    "BlogContextResponse",
    "BlogCreateBody",
    "BlogLookupResponse",
    "BlogResponse",
    "CommentResponse",
    "HealthCheckResponse",
    "LikeResponse",
    "ServicesStatus",
    "SummaryRequest",
    "dump",
]
