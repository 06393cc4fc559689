"""User domain models built with SQLModel."""

import sqlalchemy as sa
from sqlmodel import Field, Relationship, SQLModel

from .common import TimestampMixin
from .role import Role


class UserRoleLink(SQLModel, table=True):
    """Association row granting a role to a user."""

    __tablename__ = "user_roles"

    user_id: int | None = Field(
        default=None,
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    role_id: int | None = Field(
        default=None,
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("roles.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )


class UserBase(SQLModel, table=False):
    """Shared attributes for user models."""

    username: str = Field(
        max_length=50,
        sa_column=sa.Column(sa.String(length=50), nullable=False, unique=True),
    )
    email: str = Field(
        max_length=320,
        sa_column=sa.Column(sa.String(length=320), nullable=False, unique=True),
    )


class User(UserBase, TimestampMixin, table=True):
    """Persistent user model."""

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    hashed_password: str = Field(
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=False),
    )
    roles: list[Role] = Relationship(
        link_model=UserRoleLink,
        sa_relationship_kwargs={"lazy": "selectin", "order_by": "Role.id"},
    )


__all__ = ["User", "UserBase", "UserRoleLink"]
