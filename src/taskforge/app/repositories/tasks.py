"""Repository for interacting with task persistence models."""

from __future__ import annotations

from datetime import datetime

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Task, TaskStatus
from .base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Concrete repository encapsulating ``Task`` persistence operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Task)

    async def list_by_deadline_between(self, start: datetime, end: datetime) -> list[Task]:
        """Return tasks whose deadline falls in ``[start, end]``, both ends inclusive."""
        result = await self.session.execute(
            select(Task)
            .where(Task.deadline.is_not(None), Task.deadline.between(start, end))  # type: ignore[union-attr]
            .order_by(Task.deadline, Task.id)
        )
        return list(result.scalars().all())

    async def list_by_status(self, status: TaskStatus) -> list[Task]:
        """Return tasks filtered by status."""
        result = await self.session.execute(select(Task).where(Task.status == status).order_by(Task.id))
        return list(result.scalars().all())

    async def list_for_assignee(self, user_id: int) -> list[Task]:
        result = await self.session.execute(
            select(Task).where(Task.assigned_to_id == user_id).order_by(Task.id)
        )
        return list(result.scalars().all())


__all__ = ["TaskRepository"]
