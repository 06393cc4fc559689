from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI, status
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from taskforge import __version__
from taskforge.app.deps import get_db_session

pytestmark = pytest.mark.asyncio


async def test_health_endpoint_returns_ok(client: AsyncClient) -> None:
    response = await client.get("/healthz")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok", "database": "ok"}


class UnreachableDatabase:
    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, ConnectionRefusedError("connection refused"))


async def test_health_endpoint_reports_unreachable_database(app: FastAPI, client: AsyncClient) -> None:
    async def _unreachable() -> AsyncIterator[UnreachableDatabase]:
        yield UnreachableDatabase()

    app.dependency_overrides[get_db_session] = _unreachable

    response = await client.get("/healthz")

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json() == {"status": "unavailable", "database": "unavailable"}


async def test_root_endpoint_reports_metadata(client: AsyncClient) -> None:
    response = await client.get("/")

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["name"] == "TaskForge API"
    assert body["version"] == __version__
    assert body["api_prefix"] == "/api"


async def test_responses_carry_a_request_id(client: AsyncClient) -> None:
    generated = await client.get("/healthz")
    echoed = await client.get("/healthz", headers={"X-Request-ID": "abc-123"})

    assert generated.headers["X-Request-ID"]
    assert echoed.headers["X-Request-ID"] == "abc-123"


async def test_error_bodies_name_the_service(client: AsyncClient) -> None:
    response = await client.get("/api/tasks/12345")

    body = response.json()
    assert body["service"] == "TaskForge"
    assert body["path"] == "/api/tasks/12345"
