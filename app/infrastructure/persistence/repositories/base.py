"""Base repository: generic get/create/update, commit, and lifecycle hooks."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base


class BaseRepository[ModelType: Base]:
    """Base repository with get_by_id, create, update, commit and hooks.

    Subclasses override _on_after_create and _on_after_update for logging or
    cache invalidation. There is no delete: employees are soft-deleted and
    history rows are append-only.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record (flush, not commit) and run _on_after_create hook."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_create(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush changes on an attached record and run _on_after_update hook."""
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_update(obj)
        return obj

    async def commit(self) -> None:
        """Commit the session; roll back and re-raise on failure."""
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

    async def _on_after_create(self, obj: ModelType) -> None:
        """Override in subclasses to log or invalidate caches."""

    async def _on_after_update(self, obj: ModelType) -> None:
        """Override in subclasses to log or invalidate caches."""
