"""User database model using SQLModel."""

from typing import cast

from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class UserDB(SQLModel, table=True):
    """
    Registered commenter.

    Only referenced by `comment.user`; no route reads or writes it yet.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    email: str = Field(
        sa_column=Column("email", String, primary_key=True, nullable=False),
        description="Email address (primary key)",
    )
    nick_name: str | None = Field(
        default=None,
        sa_column=Column("nickName", String),
    )
    personal_website: str | None = Field(
        default=None,
        sa_column=Column("personalWebsite", String),
    )
