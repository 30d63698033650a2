"""
Database initialization and verification script.

This script verifies database connectivity and creates missing tables. It can
be run independently (`python -m app.db.init_db`) or relies on the application
lifespan doing the same on startup.

Note:
    Managed deployments apply the schema with Alembic:
    'alembic upgrade head'.
"""

from asyncio import run as asyncio_run
from logging import getLogger

from app.configs import file_logger
from app.db.database import close_db, init_db, ping_db
from app.errors.database import DatabaseInitializationError

logger = file_logger(getLogger(__name__))


async def main() -> None:
    """Verify database connection."""
    try:
        logger.info("Verifying database connection...")
        if not await ping_db():
            raise DatabaseInitializationError(detail="Database did not answer")
        await init_db()
        logger.info("Database ready!")
    except DatabaseInitializationError:
        raise
    except Exception as e:
        logger.exception("Failed to connect to database")
        raise DatabaseInitializationError from e
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio_run(main())
