"""Generic CRUD controller mapping HTTP verbs onto a ``BaseService``.

Endpoint signatures are built from the schema classes held by the controller,
so annotations in this module must stay evaluated at definition time.
"""

from collections.abc import Callable
from typing import Annotated, Any, Generic, TypeVar

from fastapi import APIRouter, Depends, Path, Response, status
from pydantic import BaseModel

from ...schemas import ErrorResponse
from ...services.base import BaseService

ServiceType = TypeVar("ServiceType", bound=BaseService[Any, Any, Any, Any])

MAX_ENTITY_ID = 2**31 - 1

# Primary keys are 32-bit integer columns.
EntityId = Annotated[int, Path(ge=1, le=MAX_ENTITY_ID)]

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse},
}


class BaseController(Generic[ServiceType]):
    """Register create/read/list/update/delete routes for one resource.

    Subclasses add resource-specific endpoints in :meth:`register_routes`,
    which runs before the generic routes so literal paths such as
    ``/deadline-soon`` are matched ahead of ``/{entity_id}``.
    """

    def __init__(
        self,
        *,
        prefix: str,
        tags: list[str],
        resource_name: str,
        service_dependency: Callable[..., ServiceType],
        create_schema: type[BaseModel],
        update_schema: type[BaseModel],
        read_schema: type[BaseModel],
    ) -> None:
        self.resource_name = resource_name
        self.service_dependency = service_dependency
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.read_schema = read_schema
        self.router = APIRouter(prefix=prefix, tags=tags, responses=ERROR_RESPONSES)

        self.register_routes(self.router)
        self._register_crud_routes(self.router)

    def register_routes(self, router: APIRouter) -> None:
        """Hook for resource-specific endpoints."""

    def to_read(self, entity: Any) -> BaseModel:
        return self.read_schema.model_validate(entity)

    def _register_crud_routes(self, router: APIRouter) -> None:
        create_schema = self.create_schema
        update_schema = self.update_schema
        read_schema = self.read_schema
        service_dependency = self.service_dependency
        name = self.resource_name

        @router.post("", response_model=read_schema, summary=f"Create a {name}")
        async def create(payload: create_schema, service: Any = Depends(service_dependency)) -> Any:
            return self.to_read(await service.create_from(payload))

        @router.get("/{entity_id}", response_model=read_schema, summary=f"Retrieve a {name} by id")
        async def get_by_id(entity_id: EntityId, service: Any = Depends(service_dependency)) -> Any:
            return self.to_read(await service.get_or_raise(entity_id))

        @router.get("", response_model=list[read_schema], summary=f"List every {name}")
        async def get_all(service: Any = Depends(service_dependency)) -> Any:
            return [self.to_read(entity) for entity in await service.find_all()]

        @router.put("/{entity_id}", response_model=read_schema, summary=f"Update a {name}")
        async def update(
            entity_id: EntityId,
            payload: update_schema,
            service: Any = Depends(service_dependency),
        ) -> Any:
            return self.to_read(await service.update_from(entity_id, payload))

        @router.delete(
            "/{entity_id}",
            status_code=status.HTTP_204_NO_CONTENT,
            response_class=Response,
            summary=f"Delete a {name}",
        )
        async def delete(entity_id: EntityId, service: Any = Depends(service_dependency)) -> Response:
            await service.delete_by_id(entity_id)
            return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["BaseController", "ERROR_RESPONSES", "EntityId", "MAX_ENTITY_ID"]
