"""
Blog schemas for the Dynablog API.

Rows are exposed with the camelCase names of the storage schema
(`postLink`, `aiSummary`, `commentPool`, ...), which is what the static site
consumes.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CommentResponse(BaseModel):
    """Comment row as returned inside a blog context."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    comment_pool: int | None = Field(default=None, alias="commentPool")
    parent: int | None = None
    user: str | None = None
    is_visitor: bool = Field(alias="isVisitor")
    visitor_ip: str | None = Field(default=None, alias="visitorIp")
    value: str
    created_at: datetime = Field(alias="createdAt")
    likes: str | None = ""


class BlogResponse(BaseModel):
    """Blog row."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 860213,
                "title": "测试",
                "postLink": "/example",
                "likes": "mvrkm",
                "aiSummary": None,
            },
        },
    )

    id: int
    title: str | None = None
    post_link: str = Field(alias="postLink")
    likes: str = ""
    ai_summary: str | None = Field(default=None, alias="aiSummary")


class BlogContextResponse(BlogResponse):
    """Blog row with every comment of its comment pool."""

    comments: list[CommentResponse] = Field(default_factory=list)


class BlogCreateBody(BaseModel):
    """Optional body of the explicit-id creation route."""

    title: str | None = Field(default=None, examples=["测试"])
    post_link: str | None = Field(default=None, examples=["/example"])


class BlogLookupResponse(BaseModel):
    """Answer of the lookup-by-path route."""

    exist: bool
    blog: BlogResponse | None = None
    message: str | None = None


class ApiResponse(BaseModel):
    """The `{success, message, value}` envelope shared by mutating routes."""

    success: bool
    message: str | None = None
    value: Any = None


class LikeResponse(ApiResponse):
    new_likes: int | None = None


class SummaryRequest(BaseModel):
    """Body of the summary generation hook."""

    content: str | None = Field(default=None, description="Raw post content")


def dump(model: BaseModel) -> dict[str, Any]:
    """Serialize a response model with wire names, leaving out unset fields."""
    return model.model_dump(mode="json", by_alias=True, exclude_unset=True)
