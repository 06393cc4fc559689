"""Role-related Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RoleCreate(BaseModel):
    """Payload for creating a role."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={"example": {"name": "admin"}},
    )

    name: str = Field(min_length=1, max_length=50)


class RoleUpdate(BaseModel):
    """Payload for renaming a role."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=1, max_length=50)


class RoleRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


__all__ = ["RoleCreate", "RoleRead", "RoleUpdate"]
