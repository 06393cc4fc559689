"""Routes handling task CRUD operations."""

from __future__ import annotations

from fastapi import APIRouter

from ...deps import TaskServiceDependency, get_task_service
from ...schemas import TaskCreate, TaskRead, TaskUpdate
from ...services import TaskService
from .base import BaseController


class TaskController(BaseController[TaskService]):
    """Generic task CRUD plus the validated-create and deadline endpoints."""

    def __init__(self) -> None:
        super().__init__(
            prefix="/tasks",
            tags=["tasks"],
            resource_name="task",
            service_dependency=get_task_service,
            create_schema=TaskCreate,
            update_schema=TaskUpdate,
            read_schema=TaskRead,
        )

    def register_routes(self, router: APIRouter) -> None:
        @router.post(
            "/custom",
            response_model=TaskRead,
            summary="Create a task with deadline validation",
        )
        async def create_task_with_validation(
            payload: TaskCreate,
            service: TaskServiceDependency,
        ) -> TaskRead:
            return TaskRead.model_validate(await service.create_task(payload))

        @router.get(
            "/deadline-soon",
            response_model=list[TaskRead],
            summary="Tasks due within the next 24 hours",
        )
        async def get_tasks_with_close_deadline(service: TaskServiceDependency) -> list[TaskRead]:
            tasks = await service.list_tasks_with_close_deadline()
            return [TaskRead.model_validate(task) for task in tasks]


router = TaskController().router

__all__ = ["TaskController", "router"]
