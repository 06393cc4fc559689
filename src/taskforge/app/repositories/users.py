"""Repository for interacting with user persistence models."""

from __future__ import annotations

from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Concrete repository for CRUD operations on ``User`` entities."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> User | None:
        """Return a user matching the supplied email if it exists."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> User | None:
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str, *, exclude_id: int | None = None) -> bool:
        return await self.exists_by("email", email, exclude_id=exclude_id)

    async def exists_by_username(self, username: str, *, exclude_id: int | None = None) -> bool:
        return await self.exists_by("username", username, exclude_id=exclude_id)

    async def refresh(self, instance: User) -> User:
        """Reload ``instance`` together with its role collection."""
        result = await self.session.execute(
            select(User)
            .where(User.id == instance.id)
            .options(selectinload(User.roles))  # type: ignore[arg-type]
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()


__all__ = ["UserRepository"]
