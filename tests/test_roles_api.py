from __future__ import annotations

import pytest
from fastapi import status
from httpx import AsyncClient

from taskforge.app.repositories import RoleRepository

pytestmark = pytest.mark.asyncio


async def test_role_crud_round_trip(client: AsyncClient) -> None:
    created = await client.post("/api/roles", json={"name": "admin"})
    assert created.status_code == status.HTTP_200_OK
    role_id = created.json()["id"]

    renamed = await client.put(f"/api/roles/{role_id}", json={"name": "owner"})
    assert renamed.status_code == status.HTTP_200_OK
    assert renamed.json() == {"id": role_id, "name": "owner"}

    listing = await client.get("/api/roles")
    assert listing.json() == [{"id": role_id, "name": "owner"}]

    deleted = await client.delete(f"/api/roles/{role_id}")
    assert deleted.status_code == status.HTTP_204_NO_CONTENT
    assert (await client.get(f"/api/roles/{role_id}")).status_code == status.HTTP_404_NOT_FOUND


async def test_duplicate_role_is_a_conflict(client: AsyncClient) -> None:
    await client.post("/api/roles", json={"name": "admin"})

    response = await client.post("/api/roles", json={"name": "admin"})

    assert response.status_code == status.HTTP_409_CONFLICT
    body = response.json()
    assert body["message"] == "Role already exists!"
    assert body["error"] == "Conflict"


async def test_rename_to_existing_role_is_a_conflict(client: AsyncClient) -> None:
    await client.post("/api/roles", json={"name": "admin"})
    editor = (await client.post("/api/roles", json={"name": "editor"})).json()

    response = await client.put(f"/api/roles/{editor['id']}", json={"name": "admin"})

    assert response.status_code == status.HTTP_409_CONFLICT


async def test_missing_role_message(client: AsyncClient) -> None:
    response = await client.get("/api/roles/404")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "Role not found!"


async def test_out_of_range_role_id_is_rejected_on_delete(client: AsyncClient) -> None:
    response = await client.delete("/api/roles/18446744073709551616")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Constraint violation"


async def test_unique_constraint_race_yields_one_row_and_a_conflict(
    client: AsyncClient,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    async def _never_exists(self, name: str, *, exclude_id: int | None = None) -> bool:
        return False

    monkeypatch.setattr(RoleRepository, "exists_by_name", _never_exists)

    first = await client.post("/api/roles", json={"name": "admin"})
    second = await client.post("/api/roles", json={"name": "admin"})

    assert first.status_code == status.HTTP_200_OK
    assert second.status_code == status.HTTP_409_CONFLICT
    assert second.json()["message"] == "Database error"

    listing = await client.get("/api/roles")
    assert [role["name"] for role in listing.json()] == ["admin"]
