"""User-facing Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from .role import RoleRead


def _dedupe(role_ids: list[int] | None) -> list[int] | None:
    if role_ids is None:
        return None
    return list(dict.fromkeys(role_ids))


class UserCreate(BaseModel):
    """Payload for registering a user."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "username": "alice",
                "email": "alice@example.com",
                "password": "correct-horse-battery",
                "role_ids": [1],
            }
        },
    )

    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    role_ids: list[int] = Field(default_factory=list)

    @field_validator("role_ids")
    @classmethod
    def _dedupe_role_ids(cls, value: list[int] | None) -> list[int] | None:
        return _dedupe(value)


class UserUpdate(BaseModel):
    """Payload for updating a user; only non-null fields are applied."""

    model_config = ConfigDict(str_strip_whitespace=True)

    username: str | None = Field(default=None, min_length=3, max_length=50)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=8, max_length=128)
    role_ids: list[int] | None = None

    @field_validator("role_ids")
    @classmethod
    def _dedupe_role_ids(cls, value: list[int] | None) -> list[int] | None:
        return _dedupe(value)


class UserRolesUpdate(BaseModel):
    """Replacement role set for a user."""

    role_ids: list[int] = Field(default_factory=list)

    @field_validator("role_ids")
    @classmethod
    def _dedupe_role_ids(cls, value: list[int] | None) -> list[int] | None:
        return _dedupe(value)


class UserRead(BaseModel):
    """Public representation of a user. The password hash is never exposed."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: EmailStr
    roles: list[RoleRead] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


__all__ = ["UserCreate", "UserRead", "UserRolesUpdate", "UserUpdate"]
