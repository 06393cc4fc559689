"""Role domain model."""

from __future__ import annotations

import sqlalchemy as sa
from sqlmodel import Field, SQLModel


class RoleBase(SQLModel, table=False):
    """Shared attributes for role models."""

    name: str = Field(
        max_length=50,
        sa_column=sa.Column(sa.String(length=50), nullable=False, unique=True),
    )


class Role(RoleBase, table=True):
    """Persistent role model."""

    __tablename__ = "roles"

    id: int | None = Field(default=None, primary_key=True)


__all__ = ["Role", "RoleBase"]
