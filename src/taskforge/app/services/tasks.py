"""Service layer encapsulating task-related operations."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any

from sqlmodel.ext.asyncio.session import AsyncSession

from ..errors import BadRequestError, NotFoundError
from ..models import Task, TaskStatus
from ..models.common import as_utc, utcnow
from ..repositories import TaskRepository, UserRepository
from ..schemas import TaskCreate, TaskUpdate
from .base import BaseService

CLOSE_DEADLINE_WINDOW = timedelta(hours=24)


class TaskService(BaseService[Task, TaskRepository, TaskCreate, TaskUpdate]):
    """High-level business orchestration for ``Task`` entities."""

    entity_name = "Task"

    def __init__(self, session: AsyncSession, *, logger: logging.Logger | None = None) -> None:
        super().__init__(session, TaskRepository(session), logger=logger)
        self._user_repository = UserRepository(session)

    async def _ensure_assignee_exists(self, user_id: int | None) -> None:
        if user_id is not None and not await self._user_repository.exists_by_id(user_id):
            raise NotFoundError("Assigned user not found!")

    async def create_task(self, payload: TaskCreate) -> Task:
        """Create a task, stamping timestamps and enforcing the deadline rule.

        Raises ``BadRequestError`` when the deadline precedes the creation
        time; nothing is persisted in that case.
        """
        self._logger.info("Creating task with title=%s", payload.title)
        now = utcnow()
        deadline = as_utc(payload.deadline) if payload.deadline is not None else None
        if deadline is not None and deadline < now:
            raise BadRequestError("Deadline cannot be before creation date!")
        await self._ensure_assignee_exists(payload.assigned_to_id)

        task = Task(
            title=payload.title,
            status=payload.status,
            priority=payload.priority,
            deadline=deadline,
            assigned_to_id=payload.assigned_to_id,
            created_at=now,
            updated_at=now,
        )
        saved = await self.create(task)
        self._logger.info("Task created successfully with id=%s", saved.id)
        return saved

    async def create_from(self, payload: TaskCreate) -> Task:
        return await self.create_task(payload)

    async def update_task(self, task_id: int, payload: TaskUpdate) -> Task:
        """Merge the non-null fields of ``payload`` into the task and bump ``updated_at``."""
        self._logger.info("Updating task id=%s", task_id)
        saved = await super().update_from(task_id, payload)
        self._logger.info("Task updated successfully id=%s", saved.id)
        return saved

    async def update_from(self, entity_id: int, payload: TaskUpdate) -> Task:
        return await self.update_task(entity_id, payload)

    async def _apply_changes(self, entity: Task, changes: dict[str, Any]) -> None:
        await self._ensure_assignee_exists(changes.get("assigned_to_id"))
        if "deadline" in changes:
            changes["deadline"] = as_utc(changes["deadline"])
        await super()._apply_changes(entity, changes)
        entity.updated_at = utcnow()

    async def list_tasks_with_close_deadline(self, now: datetime | None = None) -> list[Task]:
        """Return tasks due within ``[now, now + 24h]``."""
        start = as_utc(now) if now is not None else utcnow()
        return await self._repository.list_by_deadline_between(start, start + CLOSE_DEADLINE_WINDOW)

    async def list_tasks_by_status(self, status: TaskStatus) -> list[Task]:
        return await self._repository.list_by_status(status)

    async def list_tasks_for_assignee(self, user_id: int) -> list[Task]:
        return await self._repository.list_for_assignee(user_id)

    async def delete_task(self, task_id: int) -> None:
        await self.delete_by_id(task_id)


__all__ = ["CLOSE_DEADLINE_WINDOW", "TaskService"]
