"""User-centric API endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from ...deps import UserServiceDependency, get_user_service
from ...schemas import UserCreate, UserRead, UserRolesUpdate, UserUpdate
from ...services import UserService
from .base import BaseController, EntityId


class UserController(BaseController[UserService]):
    """Generic user CRUD plus role assignment."""

    def __init__(self) -> None:
        super().__init__(
            prefix="/users",
            tags=["users"],
            resource_name="user",
            service_dependency=get_user_service,
            create_schema=UserCreate,
            update_schema=UserUpdate,
            read_schema=UserRead,
        )

    def register_routes(self, router: APIRouter) -> None:
        @router.put(
            "/{entity_id}/roles",
            response_model=UserRead,
            summary="Replace the roles granted to a user",
        )
        async def assign_roles(
            entity_id: EntityId,
            payload: UserRolesUpdate,
            service: UserServiceDependency,
        ) -> UserRead:
            return UserRead.model_validate(await service.assign_roles(entity_id, payload.role_ids))


router = UserController().router

__all__ = ["UserController", "router"]
