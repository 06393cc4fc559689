"""Entry point for the TaskForge FastAPI application."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routers import api_router, health_router
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .core.middleware import CorrelationIdMiddleware
from .db.session import init_db
from .deps import SettingsDependency
from .errors import register_exception_handlers
from .schemas.system import RootResponse


def create_app(settings: Settings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""

    settings = settings or get_settings()
    configure_logging(settings)
    logger = logging.getLogger("taskforge")

    router_prefix = settings.router_prefix
    openapi_url = "/openapi.json" if not router_prefix else f"{router_prefix}/openapi.json"

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        summary="Task, user and role management service.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=openapi_url,
    )

    application.state.settings = settings
    application.state.logger = logger

    application.add_middleware(CorrelationIdMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    if router_prefix:
        application.include_router(api_router, prefix=router_prefix)
    else:
        application.include_router(api_router)
    application.include_router(health_router)

    @application.get("/", response_model=RootResponse, summary="Service metadata")
    async def read_root(settings: SettingsDependency) -> RootResponse:
        return RootResponse(
            name=settings.project_name,
            environment=settings.environment,
            version=settings.version,
            api_prefix=settings.api_prefix,
        )

    register_exception_handlers(
        application,
        service_name=settings.service_name,
        logger=logger.getChild("errors"),
    )

    if settings.db_auto_create:

        @application.on_event("startup")
        async def _create_schema() -> None:
            logger.info("Ensuring database schema exists")
            await init_db()

    return application


app = create_app()


def run() -> None:
    """Convenience entry point for the ``taskforge`` console script."""

    settings = get_settings()
    uvicorn.run(
        "taskforge.app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )


if __name__ == "__main__":  # pragma: no cover
    run()
