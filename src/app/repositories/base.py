"""Base repository with common CRUD operations."""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get a record by its primary key."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def update_by_id(self, id: UUID, values: dict[str, Any]) -> bool:
        """Apply values to the record with this key. Returns False if none matched."""
        result = await self.session.execute(
            update(self.model)
            .where(self.model.id == id)  # type: ignore[attr-defined]
            .values(**values)
        )
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_id(self, id: UUID) -> bool:
        """Remove the record with this key. Returns False if none matched."""
        result = await self.session.execute(
            delete(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.rowcount > 0  # type: ignore[attr-defined]
