"""Blog database model using SQLModel."""

from typing import cast

from pydantic import ConfigDict
from sqlalchemy import Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    Column names keep the camelCase spelling of the deployed schema so that an
    existing database can be served without a data migration.
    """

    __tablename__ = cast("declared_attr[str]", "blog")

    # Auto-increment unless the caller supplies an explicit id
    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Blog ID",
    )

    title: str | None = Field(
        default=None,
        sa_column=Column("title", Text),
        description="Blog title",
    )
    post_link: str = Field(
        sa_column=Column("postLink", String, unique=True, nullable=False),
        description="Link of the post on the static site (unique)",
    )

    # Comma-joined visitor tokens
    likes: str = Field(
        default="",
        sa_column=Column("likes", Text, nullable=False, server_default=""),
        description="Comma-joined visitor tokens",
    )
    ai_summary: str | None = Field(
        default=None,
        sa_column=Column("ai_summary", Text),
        description="AI generated summary",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 860213,
                "title": "测试",
                "post_link": "/example",
                "likes": "mvrkm,5fzm",
                "ai_summary": None,
            },
        },
    )
