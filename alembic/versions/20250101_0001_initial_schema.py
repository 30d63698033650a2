"""
Initial schema: Create blog, users and comment tables.

Revision ID: 0001
Revises:
Create Date: 2025-01-01

Column names keep the camelCase spelling already used by deployed databases
(`postLink`, `commentPool`, ...).
- blog: one row per post link, with likes and the AI summary
- users: registered commenters (not used by any route yet)
- comment: threaded comments; commentPool refers to blog.id without a constraint
"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# Revision identifiers, used by Alembic
revision: str = "0001"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Apply schema changes for this revision."""
    op.create_table(
        "blog",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("postLink", sa.String(), nullable=False),
        sa.Column("likes", sa.Text(), server_default="", nullable=False),
        sa.Column("ai_summary", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("postLink"),
    )

    op.create_table(
        "users",
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("nickName", sa.String(), nullable=True),
        sa.Column("personalWebsite", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("email"),
    )

    op.create_table(
        "comment",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("commentPool", sa.Integer(), nullable=True),
        sa.Column("parent", sa.Integer(), nullable=True),
        sa.Column("user", sa.String(), nullable=True),
        sa.Column("isVisitor", sa.Boolean(), nullable=False),
        sa.Column("visitorIp", sa.String(), nullable=True),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column(
            "createdAt",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("likes", sa.Text(), server_default="", nullable=True),
        sa.ForeignKeyConstraint(["parent"], ["comment.id"]),
        sa.ForeignKeyConstraint(["user"], ["users.email"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_comment_commentPool", "comment", ["commentPool"], unique=False)


def downgrade() -> None:
    """Revert schema changes for this revision."""
    op.drop_index("ix_comment_commentPool", table_name="comment")
    op.drop_table("comment")
    op.drop_table("users")
    op.drop_table("blog")
