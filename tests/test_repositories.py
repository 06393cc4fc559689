from __future__ import annotations

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from taskforge.app.models import Role, Task, TaskStatus
from taskforge.app.repositories import RoleRepository, TaskRepository

pytestmark = pytest.mark.asyncio


async def test_add_assigns_identifier_and_get_finds_it(session: AsyncSession) -> None:
    repository = RoleRepository(session)

    role = await repository.add(Role(name="admin"))

    assert role.id is not None
    assert (await repository.get(role.id)).name == "admin"
    assert await repository.get(role.id + 1) is None


async def test_list_is_ordered_by_primary_key(session: AsyncSession) -> None:
    repository = RoleRepository(session)
    for name in ("zeta", "alpha", "mu"):
        await repository.add(Role(name=name))

    assert [role.name for role in await repository.list()] == ["zeta", "alpha", "mu"]


async def test_exists_helpers(session: AsyncSession) -> None:
    repository = RoleRepository(session)
    admin = await repository.add(Role(name="admin"))

    assert await repository.exists_by_id(admin.id)
    assert not await repository.exists_by_id(admin.id + 100)
    assert await repository.exists_by_name("admin")
    assert not await repository.exists_by_name("admin", exclude_id=admin.id)


async def test_delete_by_id_reports_whether_a_row_was_removed(session: AsyncSession) -> None:
    repository = TaskRepository(session)
    task = await repository.add(Task(title="Temporary"))

    assert await repository.delete_by_id(task.id) is True
    assert await repository.delete_by_id(task.id) is False
    assert await repository.list() == []


async def test_list_by_ids_skips_unknown_ids(session: AsyncSession) -> None:
    repository = RoleRepository(session)
    admin = await repository.add(Role(name="admin"))

    assert await repository.list_by_ids([]) == []
    assert [role.id for role in await repository.list_by_ids([admin.id, 999])] == [admin.id]


async def test_list_by_status(session: AsyncSession) -> None:
    repository = TaskRepository(session)
    await repository.add(Task(title="Open"))
    await repository.add(Task(title="Closed", status=TaskStatus.DONE))

    assert [task.title for task in await repository.list_by_status(TaskStatus.DONE)] == ["Closed"]
