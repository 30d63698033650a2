# app/dependencies/dependencies.py

"""Application dependencies."""

from collections.abc import Callable
from typing import Annotated, Literal

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_404_NOT_FOUND

from app.clients.ai_client import AiClient
from app.configs import settings
from app.db import get_session
from app.errors import AiConfigurationError
from app.repositories import BlogRepository, CommentRepository
from app.services import BlogService, CommentService, SummaryService
from app.utils import client_ip, encode_ip

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_blog_repository(session: SessionDep) -> BlogRepository:
    return BlogRepository(session)


def get_comment_repository(session: SessionDep) -> CommentRepository:
    return CommentRepository(session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
CommentRepoDep = Annotated[CommentRepository, Depends(get_comment_repository)]


def get_ai_client(request: Request) -> AiClient:
    """Return the AI client created during application startup."""
    ai_client: AiClient | None = getattr(request.app.state, "ai_client", None)
    if ai_client is None:
        raise AiConfigurationError
    return ai_client


AiDep = Annotated[AiClient, Depends(get_ai_client)]


def get_blog_service(repo: BlogRepoDep) -> BlogService:
    return BlogService(repo)


def get_comment_service(blog_repo: BlogRepoDep, comment_repo: CommentRepoDep) -> CommentService:
    return CommentService(blog_repo, comment_repo)


def get_summary_service(repo: BlogRepoDep, ai_client: AiDep) -> SummaryService:
    return SummaryService(repo, ai_client)


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]
SummaryServiceDep = Annotated[SummaryService, Depends(get_summary_service)]


def get_visitor_token(request: Request) -> str:
    """Encode the caller's apparent IP into its visitor token."""
    return encode_ip(client_ip(request))


VisitorTokenDep = Annotated[str, Depends(get_visitor_token)]


def require_id_strategy(strategy: Literal["auto", "explicit"]) -> Callable[[], None]:
    """
    Gate a blog creation route behind the configured id strategy.

    Args:
        strategy: "auto" for link-keyed creation with generated ids,
            "explicit" for caller-supplied ids.

    Returns:
        A dependency answering 404 when the strategy is disabled.
    """

    def dependency() -> None:
        if settings.BLOG_ID_STRATEGY not in (strategy, "both"):
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Not found")

    return dependency
