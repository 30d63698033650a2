"""Base repository for database operations."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
)

type FilterValue = str | int | bool | None

# Ids are stored in 32-bit INTEGER columns
MAX_ID = (1 << 31) - 1


def in_id_range(record_id: int) -> bool:
    """Return True when an id can exist in an INTEGER primary key column."""
    return 0 <= record_id <= MAX_ID


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing the lookups shared by every table.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: int) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Primary key value

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        if not in_id_range(record_id):
            return None
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_field(
        self,
        field_name: str,
        value: FilterValue,
    ) -> ModelT | None:
        """
        Get a record by a specific field value.

        Args:
            field_name: Name of the field to search
            value: Value to search for

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        field = getattr(self.model, field_name)
        statement = select(self.model).where(field == value)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def exists(self, record_id: int) -> bool:
        """
        Check if a record exists without loading it.

        Args:
            record_id: Primary key value

        Returns:
            bool: True if record exists, False otherwise
        """
        if not in_id_range(record_id):
            return False
        id_column = getattr(self.model, self.id_field)
        statement = select(1).where(id_column == record_id).limit(1)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none() is not None

    async def delete(self, record_id: int) -> bool:
        """
        Delete a record by ID.

        Args:
            record_id: Primary key value

        Returns:
            bool: True if record was deleted, False if not found

        Raises:
            DatabaseError: If other rows still reference the record
        """
        record = await self.get_by_id(record_id)
        if not record:
            return False

        try:
            await self.session.delete(record)
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        return True

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other database errors
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            return record
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(detail=error_msg) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except Exception as e:
            await self.session.rollback()
            raise DatabaseConnectionError(
                detail=f"Failed to save record: {e}",
            ) from e
