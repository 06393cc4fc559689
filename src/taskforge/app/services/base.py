"""Generic CRUD service layered over :class:`BaseRepository`."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from sqlmodel.ext.asyncio.session import AsyncSession

from ..core.logging import get_component_logger
from ..errors import NotFoundError
from ..repositories.base import BaseRepository, ModelType

RepositoryType = TypeVar("RepositoryType", bound=BaseRepository[Any])
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


def merge_changes(payload: BaseModel) -> dict[str, Any]:
    """Return the fields of ``payload`` that should overwrite stored values.

    Fields left out of the request or sent as ``null`` are dropped, so an
    update can never wipe a stored value.
    """

    return payload.model_dump(exclude_unset=True, exclude_none=True)


class BaseService(Generic[ModelType, RepositoryType, CreateSchemaType, UpdateSchemaType]):
    """CRUD operations shared by every entity service.

    ``create`` and ``update`` here carry no business rules: ``create``
    persists what it is given and ``update`` replaces the stored entity
    wholesale. Entity services layer validation on top by overriding the
    ``create_from``/``update_from`` hooks used by the HTTP controllers.
    """

    entity_name: ClassVar[str] = "Entity"

    def __init__(
        self,
        session: AsyncSession,
        repository: RepositoryType,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._session = session
        self._repository = repository
        self._logger = logger or get_component_logger(type(self))

    @property
    def repository(self) -> RepositoryType:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @asynccontextmanager
    async def _unit_of_work(self) -> AsyncIterator[None]:
        """Commit on success; roll back and re-raise on any failure."""
        try:
            yield
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.entity_name} not found!")

    async def create(self, entity: ModelType) -> ModelType:
        """Persist ``entity`` and return it with its generated identifier."""
        async with self._unit_of_work():
            await self._repository.add(entity)
        return await self._repository.refresh(entity)

    async def find_by_id(self, entity_id: int) -> ModelType | None:
        """Return the entity with ``entity_id`` or ``None``; never raises for a miss."""
        return await self._repository.get(entity_id)

    async def get_or_raise(self, entity_id: int) -> ModelType:
        self._logger.debug("Fetching %s with id=%s", self.entity_name.lower(), entity_id)
        entity = await self._repository.get(entity_id)
        if entity is None:
            raise self._not_found()
        return entity

    async def find_all(self) -> list[ModelType]:
        return await self._repository.list()

    async def update(self, entity_id: int, entity: ModelType) -> ModelType:
        """Replace the stored entity with ``entity``; raise ``NotFoundError`` if absent."""
        if not await self._repository.exists_by_id(entity_id):
            raise self._not_found()
        entity.id = entity_id  # type: ignore[attr-defined]
        async with self._unit_of_work():
            merged = await self._repository.merge(entity)
        return await self._repository.refresh(merged)

    async def delete_by_id(self, entity_id: int) -> None:
        """Delete by id. Deleting an id that does not exist is not an error."""
        self._logger.warning("Deleting %s id=%s", self.entity_name.lower(), entity_id)
        async with self._unit_of_work():
            await self._repository.delete_by_id(entity_id)

    async def create_from(self, payload: CreateSchemaType) -> ModelType:
        """Build an entity from a request payload and persist it."""
        entity = self._repository.model_type(**payload.model_dump())
        return await self.create(entity)

    async def update_from(self, entity_id: int, payload: UpdateSchemaType) -> ModelType:
        """Apply the non-null fields of ``payload`` to the stored entity."""
        entity = await self.get_or_raise(entity_id)
        changes = merge_changes(payload)
        async with self._unit_of_work():
            await self._apply_changes(entity, changes)
            await self._session.flush()
        return await self._repository.refresh(entity)

    async def _apply_changes(self, entity: ModelType, changes: dict[str, Any]) -> None:
        for field, value in changes.items():
            setattr(entity, field, value)


__all__ = [
    "BaseService",
    "CreateSchemaType",
    "RepositoryType",
    "UpdateSchemaType",
    "merge_changes",
]
