"""Database repositories for encapsulating persistence logic."""

from __future__ import annotations

from .base import BaseRepository
from .roles import RoleRepository
from .tasks import TaskRepository
from .users import UserRepository

__all__ = ["BaseRepository", "RoleRepository", "TaskRepository", "UserRepository"]
