"""Task domain models built with SQLModel."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .common import TimestampMixin


class TaskStatus(str, Enum):
    """Enumeration of possible task states."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class TaskPriority(str, Enum):
    """How urgently a task should be picked up."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _enum_values(enum_type: type[Enum]) -> list[str]:
    return [member.value for member in enum_type]


class TaskBase(SQLModel, table=False):
    """Shared attributes for task models."""

    title: str = Field(
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=False),
    )
    status: TaskStatus = Field(
        default=TaskStatus.NOT_STARTED,
        sa_column=sa.Column(
            sa.Enum(
                TaskStatus,
                name="task_status",
                native_enum=False,
                validate_strings=True,
                values_callable=_enum_values,
            ),
            nullable=False,
            server_default=TaskStatus.NOT_STARTED.value,
        ),
    )
    priority: TaskPriority = Field(
        default=TaskPriority.MEDIUM,
        sa_column=sa.Column(
            sa.Enum(
                TaskPriority,
                name="task_priority",
                native_enum=False,
                validate_strings=True,
                values_callable=_enum_values,
            ),
            nullable=False,
            server_default=TaskPriority.MEDIUM.value,
        ),
    )
    deadline: datetime | None = Field(
        default=None,
        sa_column=sa.Column(sa.DateTime(timezone=True), nullable=True),
    )
    assigned_to_id: int | None = Field(
        default=None,
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )


class Task(TaskBase, TimestampMixin, table=True):
    """Persistent task model."""

    __tablename__ = "tasks"
    __table_args__ = (
        sa.CheckConstraint("length(title) > 0", name="ck_tasks_title_length"),
        sa.Index("ix_tasks_deadline", "deadline"),
        sa.Index("ix_tasks_assigned_to_id", "assigned_to_id"),
    )

    id: int | None = Field(default=None, primary_key=True)


__all__ = ["Task", "TaskBase", "TaskPriority", "TaskStatus"]
