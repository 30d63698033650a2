"""Comment database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Text, func
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class CommentDB(SQLModel, table=True):
    """
    Comment database model.

    `comment_pool` points at `blog.id` without a foreign key constraint, so
    deleting a blog leaves its comments in place. `parent` threads replies and
    must name an existing comment.
    """

    __tablename__ = cast("declared_attr[str]", "comment")

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Comment ID",
    )
    comment_pool: int | None = Field(
        default=None,
        sa_column=Column("commentPool", Integer, index=True),
        description="Blog the comment belongs to",
    )
    parent: int | None = Field(
        default=None,
        sa_column=Column("parent", Integer, ForeignKey("comment.id")),
        description="Parent comment for threaded replies",
    )
    user: str | None = Field(
        default=None,
        sa_column=Column("user", String, ForeignKey("users.email")),
        description="Registered author (unused)",
    )
    is_visitor: bool = Field(
        sa_column=Column("isVisitor", Boolean, nullable=False),
    )
    # Required when is_visitor is set
    visitor_ip: str | None = Field(
        default=None,
        sa_column=Column("visitorIp", String),
        description="Encoded visitor token",
    )
    value: str = Field(
        sa_column=Column("value", Text, nullable=False),
        description="Comment text",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC).replace(microsecond=0),
        sa_column=Column(
            "createdAt",
            DateTime(timezone=True),
            nullable=False,
            server_default=func.now(),
        ),
    )
    likes: str | None = Field(
        default="",
        sa_column=Column("likes", Text, server_default=""),
    )
