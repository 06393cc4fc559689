"""Repository for role persistence."""

from __future__ import annotations

from collections.abc import Sequence

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Role
from .base import BaseRepository


class RoleRepository(BaseRepository[Role]):
    """Persistence helpers for ``Role`` entities."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Role)

    async def get_by_name(self, name: str) -> Role | None:
        result = await self.session.execute(select(Role).where(Role.name == name))
        return result.scalar_one_or_none()

    async def exists_by_name(self, name: str, *, exclude_id: int | None = None) -> bool:
        return await self.exists_by("name", name, exclude_id=exclude_id)

    async def list_by_ids(self, ids: Sequence[int]) -> list[Role]:
        """Fetch the roles whose ids are contained in ``ids``."""
        if not ids:
            return []
        result = await self.session.execute(select(Role).where(Role.id.in_(ids)).order_by(Role.id))
        return list(result.scalars().all())


__all__ = ["RoleRepository"]
