from __future__ import annotations

import pytest
from fastapi import status
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _create_role(client: AsyncClient, name: str) -> dict:
    response = await client.post("/api/roles", json={"name": name})
    assert response.status_code == status.HTTP_200_OK, response.text
    return response.json()


async def _create_user(client: AsyncClient, **overrides) -> dict:
    payload = {
        "username": "alice",
        "email": "alice@example.com",
        "password": "correct-horse-battery",
    }
    payload.update(overrides)
    response = await client.post("/api/users", json=payload)
    assert response.status_code == status.HTTP_200_OK, response.text
    return response.json()


async def test_create_user_never_exposes_password(client: AsyncClient) -> None:
    body = await _create_user(client)

    assert body["username"] == "alice"
    assert body["email"] == "alice@example.com"
    assert body["roles"] == []
    assert "password" not in body
    assert "hashed_password" not in body


async def test_create_user_with_roles(client: AsyncClient) -> None:
    admin = await _create_role(client, "admin")
    editor = await _create_role(client, "editor")

    body = await _create_user(client, role_ids=[editor["id"], admin["id"], admin["id"]])

    assert sorted(role["name"] for role in body["roles"]) == ["admin", "editor"]


async def test_duplicate_email_is_a_conflict(client: AsyncClient) -> None:
    await _create_user(client)

    response = await client.post(
        "/api/users",
        json={"username": "alice2", "email": "alice@example.com", "password": "another-secret"},
    )

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["message"] == "Email already exists!"


async def test_duplicate_username_is_a_conflict(client: AsyncClient) -> None:
    await _create_user(client)

    response = await client.post(
        "/api/users",
        json={"username": "alice", "email": "other@example.com", "password": "another-secret"},
    )

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["message"] == "Username already exists!"


async def test_invalid_email_reports_field_error(client: AsyncClient) -> None:
    response = await client.post(
        "/api/users",
        json={"username": "bob", "email": "not-an-email", "password": "correct-horse"},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    body = response.json()
    assert body["message"] == "Validation failed"
    assert body["errors"][0]["field"] == "email"
    assert body["errors"][0]["rejectedValue"] == "not-an-email"


async def test_unknown_role_is_not_found(client: AsyncClient) -> None:
    response = await client.post(
        "/api/users",
        json={
            "username": "carol",
            "email": "carol@example.com",
            "password": "correct-horse",
            "role_ids": [999],
        },
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "Role not found: 999"


async def test_update_user_keeps_omitted_fields(client: AsyncClient) -> None:
    created = await _create_user(client)

    response = await client.put(f"/api/users/{created['id']}", json={"username": "alicia"})

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["username"] == "alicia"
    assert body["email"] == "alice@example.com"


async def test_update_user_to_taken_email_conflicts(client: AsyncClient) -> None:
    await _create_user(client)
    other = await _create_user(client, username="bob", email="bob@example.com")

    response = await client.put(f"/api/users/{other['id']}", json={"email": "alice@example.com"})

    assert response.status_code == status.HTTP_409_CONFLICT


async def test_assign_roles_replaces_role_set(client: AsyncClient) -> None:
    admin = await _create_role(client, "admin")
    viewer = await _create_role(client, "viewer")
    user = await _create_user(client, role_ids=[admin["id"]])

    response = await client.put(f"/api/users/{user['id']}/roles", json={"role_ids": [viewer["id"]]})

    assert response.status_code == status.HTTP_200_OK
    assert [role["name"] for role in response.json()["roles"]] == ["viewer"]

    fetched = await client.get(f"/api/users/{user['id']}")
    assert [role["name"] for role in fetched.json()["roles"]] == ["viewer"]


async def test_assign_roles_to_missing_user(client: AsyncClient) -> None:
    response = await client.put("/api/users/9999/roles", json={"role_ids": []})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "User not found!"


async def test_delete_user(client: AsyncClient) -> None:
    created = await _create_user(client)

    response = await client.delete(f"/api/users/{created['id']}")

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert (await client.get(f"/api/users/{created['id']}")).status_code == status.HTTP_404_NOT_FOUND


async def test_assign_roles_rejects_out_of_range_user_id(client: AsyncClient) -> None:
    response = await client.put("/api/users/2147483648/roles", json={"role_ids": []})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Constraint violation"
