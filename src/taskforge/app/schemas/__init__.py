"""Pydantic schemas for public interfaces."""

from __future__ import annotations

from .role import RoleCreate, RoleRead, RoleUpdate
from .system import ErrorResponse, FieldErrorDetail, HealthCheckResponse, RootResponse
from .task import TaskCreate, TaskRead, TaskUpdate
from .user import UserCreate, UserRead, UserRolesUpdate, UserUpdate

__all__ = [
    "ErrorResponse",
    "FieldErrorDetail",
    "HealthCheckResponse",
    "RoleCreate",
    "RoleRead",
    "RoleUpdate",
    "RootResponse",
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
    "UserCreate",
    "UserRead",
    "UserRolesUpdate",
    "UserUpdate",
]
