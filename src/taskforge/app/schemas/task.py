"""Task-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models import TaskPriority, TaskStatus

TASK_READ_EXAMPLE = {
    "id": 1,
    "title": "Prepare sprint review",
    "status": TaskStatus.IN_PROGRESS.value,
    "priority": TaskPriority.HIGH.value,
    "deadline": "2024-05-03T17:00:00Z",
    "assigned_to_id": 7,
    "created_at": "2024-05-01T09:00:00Z",
    "updated_at": "2024-05-02T08:30:00Z",
}


class TaskCreate(BaseModel):
    """Payload for creating a new task.

    Identifiers and timestamps are assigned by the service; any such keys in
    the request body are ignored.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Prepare sprint review",
                "priority": TaskPriority.HIGH.value,
                "deadline": "2024-05-03T17:00:00Z",
                "assigned_to_id": 7,
            }
        }
    )

    title: str = Field(min_length=1, max_length=255)
    status: TaskStatus = Field(default=TaskStatus.NOT_STARTED)
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM)
    deadline: datetime | None = Field(default=None)
    assigned_to_id: int | None = Field(default=None, ge=1)


class TaskUpdate(BaseModel):
    """Payload for updating a task; only non-null fields are applied."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": TaskStatus.DONE.value,
                "priority": TaskPriority.LOW.value,
            }
        }
    )

    title: str | None = Field(default=None, min_length=1, max_length=255)
    status: TaskStatus | None = Field(default=None)
    priority: TaskPriority | None = Field(default=None)
    deadline: datetime | None = Field(default=None)
    assigned_to_id: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _ensure_payload_not_empty(self) -> "TaskUpdate":
        if not self.model_dump(exclude_unset=True, exclude_none=True):
            raise ValueError("At least one field must be provided for update.")
        return self


class TaskRead(BaseModel):
    """Public representation of a task."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"example": TASK_READ_EXAMPLE},
    )

    id: int
    title: str
    status: TaskStatus
    priority: TaskPriority
    deadline: datetime | None = None
    assigned_to_id: int | None = None
    created_at: datetime
    updated_at: datetime


__all__ = ["TaskCreate", "TaskRead", "TaskUpdate"]
