"""Reusable FastAPI dependencies."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request
from sqlmodel.ext.asyncio.session import AsyncSession

from .core.config import Settings, get_settings
from .db.session import get_session
from .services import RoleService, TaskService, UserService

SettingsDependency = Annotated[Settings, Depends(get_settings)]


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency that yields a database session."""

    async for session in get_session():
        yield session


def get_app_logger(request: Request) -> logging.Logger:
    """Return the logger the application was built with."""

    logger = getattr(request.app.state, "logger", None)
    if logger is None:
        return logging.getLogger("taskforge")
    return logger


DatabaseSessionDependency = Annotated[AsyncSession, Depends(get_db_session)]
LoggerDependency = Annotated[logging.Logger, Depends(get_app_logger)]


def get_task_service(session: DatabaseSessionDependency, logger: LoggerDependency) -> TaskService:
    return TaskService(session, logger=logger.getChild("tasks"))


def get_user_service(session: DatabaseSessionDependency, logger: LoggerDependency) -> UserService:
    return UserService(session, logger=logger.getChild("users"))


def get_role_service(session: DatabaseSessionDependency, logger: LoggerDependency) -> RoleService:
    return RoleService(session, logger=logger.getChild("roles"))


TaskServiceDependency = Annotated[TaskService, Depends(get_task_service)]
UserServiceDependency = Annotated[UserService, Depends(get_user_service)]
RoleServiceDependency = Annotated[RoleService, Depends(get_role_service)]


__all__ = [
    "DatabaseSessionDependency",
    "LoggerDependency",
    "RoleServiceDependency",
    "SettingsDependency",
    "TaskServiceDependency",
    "UserServiceDependency",
    "get_app_logger",
    "get_db_session",
    "get_role_service",
    "get_task_service",
    "get_user_service",
]
