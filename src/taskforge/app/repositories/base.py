"""Generic repository over asynchronous SQLModel sessions."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import exists
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Persistence operations shared by every entity repository.

    Concrete repositories bind ``model_type`` and add their own derived
    finders. Nothing here commits; transaction boundaries belong to services.
    """

    def __init__(self, session: AsyncSession, model_type: type[ModelType]) -> None:
        self._session = session
        self._model_type = model_type

    @property
    def session(self) -> AsyncSession:
        """Return the session associated with the repository."""
        return self._session

    @property
    def model_type(self) -> type[ModelType]:
        return self._model_type

    async def get(self, entity_id: int) -> ModelType | None:
        """Retrieve a model instance by its primary key."""
        return await self._session.get(self._model_type, entity_id)

    async def list(self) -> list[ModelType]:
        """Return all entities of the repository type ordered by primary key."""
        primary_key = self._model_type.__table__.primary_key.columns  # type: ignore[attr-defined]
        result = await self._session.execute(select(self._model_type).order_by(*primary_key))
        return list(result.scalars().all())

    async def add(self, instance: ModelType) -> ModelType:
        """Add and flush a new entity instance so its generated id is populated."""
        self._session.add(instance)
        await self._session.flush()
        return instance

    async def merge(self, instance: ModelType) -> ModelType:
        """Copy the full state of ``instance`` onto the stored row with the same identity."""
        merged = await self._session.merge(instance)
        await self._session.flush()
        return merged

    async def delete(self, instance: ModelType) -> None:
        """Delete an entity instance and flush the change."""
        await self._session.delete(instance)
        await self._session.flush()

    async def delete_by_id(self, entity_id: int) -> bool:
        """Delete the entity with ``entity_id`` if present; a missing id is a no-op."""
        instance = await self.get(entity_id)
        if instance is None:
            return False
        await self.delete(instance)
        return True

    async def exists_by_id(self, entity_id: int) -> bool:
        primary_key = next(iter(self._model_type.__table__.primary_key.columns))  # type: ignore[attr-defined]
        return await self._exists(primary_key == entity_id)

    async def exists_by(self, field: str, value: Any, *, exclude_id: int | None = None) -> bool:
        """Return ``True`` when some row has ``field == value``.

        ``exclude_id`` skips the row with that primary key, which lets update
        paths check a unique column against *other* rows only.
        """
        column = getattr(self._model_type, field)
        criteria = [column == value]
        if exclude_id is not None:
            criteria.append(self._model_type.id != exclude_id)  # type: ignore[attr-defined]
        return await self._exists(*criteria)

    async def refresh(self, instance: ModelType) -> ModelType:
        """Refresh an entity from the database and return it."""
        await self._session.refresh(instance)
        return instance

    async def _exists(self, *criteria: Any) -> bool:
        statement = select(exists().where(*criteria))
        result = await self._session.execute(statement)
        return bool(result.scalar())


__all__ = ["BaseRepository", "ModelType"]
