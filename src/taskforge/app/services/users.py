"""Service layer orchestrating user-related repository operations."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from sqlmodel.ext.asyncio.session import AsyncSession

from ..core.security import get_password_hash
from ..errors import ConflictError, NotFoundError
from ..models import Role, User
from ..models.common import utcnow
from ..repositories import RoleRepository, UserRepository
from ..schemas import UserCreate, UserUpdate
from .base import BaseService

PasswordHasher = Callable[[str], str]


class UserService(BaseService[User, UserRepository, UserCreate, UserUpdate]):
    """High-level business operations for ``User`` entities.

    Plaintext passwords only pass through ``password_hasher``; the model
    stores the resulting hash.
    """

    entity_name = "User"

    def __init__(
        self,
        session: AsyncSession,
        *,
        logger: logging.Logger | None = None,
        password_hasher: PasswordHasher = get_password_hash,
    ) -> None:
        super().__init__(session, UserRepository(session), logger=logger)
        self._role_repository = RoleRepository(session)
        self._hash_password = password_hasher

    async def _resolve_roles(self, role_ids: Sequence[int]) -> list[Role]:
        unique_ids = list(dict.fromkeys(role_ids))
        roles = await self._role_repository.list_by_ids(unique_ids)
        missing = sorted(set(unique_ids) - {role.id for role in roles})
        if missing:
            raise NotFoundError(f"Role not found: {', '.join(str(role_id) for role_id in missing)}")
        return roles

    async def _ensure_unique(self, *, email: str | None, username: str | None, exclude_id: int | None = None) -> None:
        if email is not None and await self._repository.exists_by_email(email, exclude_id=exclude_id):
            raise ConflictError("Email already exists!")
        if username is not None and await self._repository.exists_by_username(username, exclude_id=exclude_id):
            raise ConflictError("Username already exists!")

    async def create_user(self, payload: UserCreate) -> User:
        """Create a user with a hashed password and the requested roles."""
        self._logger.info("Creating user with email=%s", payload.email)
        await self._ensure_unique(email=payload.email, username=payload.username)
        roles = await self._resolve_roles(payload.role_ids)
        now = utcnow()
        user = User(
            username=payload.username,
            email=payload.email,
            hashed_password=self._hash_password(payload.password),
            created_at=now,
            updated_at=now,
        )
        user.roles = roles
        saved = await self.create(user)
        self._logger.info("User created successfully with id=%s", saved.id)
        return saved

    async def create_from(self, payload: UserCreate) -> User:
        return await self.create_user(payload)

    async def update_user(self, user_id: int, payload: UserUpdate) -> User:
        self._logger.info("Updating user id=%s", user_id)
        saved = await super().update_from(user_id, payload)
        self._logger.info("User updated successfully id=%s", saved.id)
        return saved

    async def update_from(self, entity_id: int, payload: UserUpdate) -> User:
        return await self.update_user(entity_id, payload)

    async def _apply_changes(self, entity: User, changes: dict[str, Any]) -> None:
        await self._ensure_unique(
            email=changes.get("email"),
            username=changes.get("username"),
            exclude_id=entity.id,
        )
        password = changes.pop("password", None)
        if password is not None:
            entity.hashed_password = self._hash_password(password)
        role_ids = changes.pop("role_ids", None)
        if role_ids is not None:
            entity.roles = await self._resolve_roles(role_ids)
        await super()._apply_changes(entity, changes)
        entity.updated_at = utcnow()

    async def assign_roles(self, user_id: int, role_ids: Sequence[int]) -> User:
        """Replace the role set of a user."""
        user = await self.get_or_raise(user_id)
        roles = await self._resolve_roles(role_ids)
        async with self._unit_of_work():
            user.roles = roles
            user.updated_at = utcnow()
            await self._session.flush()
        return await self._repository.refresh(user)

    async def get_by_email(self, email: str) -> User | None:
        return await self._repository.get_by_email(email)

    async def get_by_username(self, username: str) -> User | None:
        return await self._repository.get_by_username(username)

    async def delete_user(self, user_id: int) -> None:
        await self.delete_by_id(user_id)


__all__ = ["PasswordHasher", "UserService"]
