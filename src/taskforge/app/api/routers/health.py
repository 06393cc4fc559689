"""Liveness endpoint backed by a database round trip."""

from __future__ import annotations

from fastapi import APIRouter, Response, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ...deps import DatabaseSessionDependency, LoggerDependency
from ...schemas.system import HealthCheckResponse

router = APIRouter(tags=["system"])


@router.get(
    "/healthz",
    response_model=HealthCheckResponse,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": HealthCheckResponse}},
    summary="Health check",
)
async def read_health(
    response: Response,
    session: DatabaseSessionDependency,
    logger: LoggerDependency,
) -> HealthCheckResponse:
    """Report ``ok`` when the database answers ``SELECT 1``; otherwise 503."""
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Database health check failed", exc_info=True)
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthCheckResponse(status="unavailable", database="unavailable")
    return HealthCheckResponse(status="ok", database="ok")
