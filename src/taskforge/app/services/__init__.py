"""Domain service layer package."""

from __future__ import annotations

from .base import BaseService, merge_changes
from .roles import RoleService
from .tasks import TaskService
from .users import UserService

__all__ = ["BaseService", "RoleService", "TaskService", "UserService", "merge_changes"]
