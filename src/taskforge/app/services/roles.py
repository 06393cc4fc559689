"""Service layer orchestrating role operations."""

from __future__ import annotations

import logging
from typing import Any

from sqlmodel.ext.asyncio.session import AsyncSession

from ..errors import ConflictError
from ..models import Role
from ..repositories import RoleRepository
from ..schemas import RoleCreate, RoleUpdate
from .base import BaseService


class RoleService(BaseService[Role, RoleRepository, RoleCreate, RoleUpdate]):
    entity_name = "Role"

    def __init__(self, session: AsyncSession, *, logger: logging.Logger | None = None) -> None:
        super().__init__(session, RoleRepository(session), logger=logger)

    async def create_role(self, payload: RoleCreate) -> Role:
        """Create a role, rejecting names that are already taken."""
        self._logger.info("Attempting to create role: %s", payload.name)
        if await self._repository.exists_by_name(payload.name):
            raise ConflictError("Role already exists!")
        saved = await self.create(Role(name=payload.name))
        self._logger.info("Role created successfully with id: %s", saved.id)
        return saved

    async def create_from(self, payload: RoleCreate) -> Role:
        return await self.create_role(payload)

    async def update_role(self, role_id: int, payload: RoleUpdate) -> Role:
        self._logger.info("Updating role id=%s with new name=%s", role_id, payload.name)
        return await super().update_from(role_id, payload)

    async def update_from(self, entity_id: int, payload: RoleUpdate) -> Role:
        return await self.update_role(entity_id, payload)

    async def _apply_changes(self, entity: Role, changes: dict[str, Any]) -> None:
        name = changes.get("name")
        if name is not None and await self._repository.exists_by_name(name, exclude_id=entity.id):
            raise ConflictError("Role already exists!")
        await super()._apply_changes(entity, changes)

    async def get_by_name(self, name: str) -> Role | None:
        return await self._repository.get_by_name(name)


__all__ = ["RoleService"]
