# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    AiDep,
    BlogRepoDep,
    BlogServiceDep,
    CommentRepoDep,
    CommentServiceDep,
    SessionDep,
    SummaryServiceDep,
    VisitorTokenDep,
    get_ai_client,
    get_blog_repository,
    get_blog_service,
    get_comment_repository,
    get_comment_service,
    get_summary_service,
    get_visitor_token,
    require_id_strategy,
)

__all__ = [
    "AiDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "CommentRepoDep",
    "CommentServiceDep",
    "SessionDep",
    "SummaryServiceDep",
    "VisitorTokenDep",
    "get_ai_client",
    "get_blog_repository",
    "get_blog_service",
    "get_comment_repository",
    "get_comment_service",
    "get_summary_service",
    "get_visitor_token",
    "require_id_strategy",
]
