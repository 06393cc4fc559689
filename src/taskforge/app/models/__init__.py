"""Domain models exposed for the TaskForge service."""

from __future__ import annotations

from .common import TimestampMixin, utcnow
from .role import Role, RoleBase
from .task import Task, TaskBase, TaskPriority, TaskStatus
from .user import User, UserBase, UserRoleLink

__all__ = [
    "Role",
    "RoleBase",
    "Task",
    "TaskBase",
    "TaskPriority",
    "TaskStatus",
    "TimestampMixin",
    "User",
    "UserBase",
    "UserRoleLink",
    "utcnow",
]
