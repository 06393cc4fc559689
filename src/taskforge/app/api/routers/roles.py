"""Routes handling role CRUD operations."""

from __future__ import annotations

from ...deps import get_role_service
from ...schemas import RoleCreate, RoleRead, RoleUpdate
from ...services import RoleService
from .base import BaseController


class RoleController(BaseController[RoleService]):
    def __init__(self) -> None:
        super().__init__(
            prefix="/roles",
            tags=["roles"],
            resource_name="role",
            service_dependency=get_role_service,
            create_schema=RoleCreate,
            update_schema=RoleUpdate,
            read_schema=RoleRead,
        )


router = RoleController().router

__all__ = ["RoleController", "router"]
