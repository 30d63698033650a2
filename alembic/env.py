"""
Migration environment for the blog database.

The URL comes from the application settings, so migrations run against the
same backend the service uses. SQLite cannot alter constraints in place,
so it migrates in batch mode (copy and move tables).
"""

from asyncio import run as asyncio_run
from logging.config import fileConfig
from typing import Any

from sqlalchemy import pool
from sqlalchemy.engine import Connection, make_url
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel import SQLModel

from alembic import context
from app.configs import settings

# Registers the tables on SQLModel.metadata for autogenerate
from app.models import BlogDB, CommentDB, UserDB  # noqa: F401

config = context.config
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = SQLModel.metadata


def migration_options(database_url: str) -> dict[str, Any]:
    """Options shared by offline and online runs."""
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "compare_server_default": True,
        "render_as_batch": make_url(database_url).get_backend_name() == "sqlite",
    }


def run_migrations_offline() -> None:
    """Emit the migration SQL instead of applying it."""
    context.configure(
        url=settings.DATABASE_URL,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **migration_options(settings.DATABASE_URL),
    )
    with context.begin_transaction():
        context.run_migrations()


def apply_migrations(connection: Connection) -> None:
    context.configure(connection=connection, **migration_options(settings.DATABASE_URL))
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Apply migrations over a throwaway async engine."""
    migration_engine = create_async_engine(settings.DATABASE_URL, poolclass=pool.NullPool)
    try:
        async with migration_engine.connect() as connection:
            await connection.run_sync(apply_migrations)
    finally:
        await migration_engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio_run(run_migrations_online())
