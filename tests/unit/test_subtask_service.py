"""SubtaskService unit tests: parent ownership and positions."""

import pytest

from fakes import OTHER_USER_ID, USER_ID, FakeSubtaskRepository, FakeTaskRepository, InMemoryStore
from taskflow.application.use_cases.subtasks import SubtaskService
from taskflow.domain.exceptions import ResourceNotFoundException


@pytest.fixture
def service(task_repo: FakeTaskRepository, subtask_repo: FakeSubtaskRepository) -> SubtaskService:
    return SubtaskService(task_repo, subtask_repo)


async def test_create_appends_and_ignores_client_position(
    service: SubtaskService, store: InMemoryStore
) -> None:
    task = store.add_task(USER_ID)
    first = await service.create_subtask(USER_ID, task["id"], {"title": "a", "position": 9})
    second = await service.create_subtask(USER_ID, task["id"], {"title": "b", "position": 0})
    assert (first["position"], second["position"]) == (0, 1)
    assert first["completed"] is False


async def test_operations_on_foreign_task_are_not_found(
    service: SubtaskService, store: InMemoryStore
) -> None:
    task = store.add_task(OTHER_USER_ID)
    with pytest.raises(ResourceNotFoundException):
        await service.list_subtasks(USER_ID, task["id"])
    with pytest.raises(ResourceNotFoundException):
        await service.create_subtask(USER_ID, task["id"], {"title": "x"})
    assert store.subtasks == {}


async def test_toggle_flips_completed(service: SubtaskService, store: InMemoryStore) -> None:
    task = store.add_task(USER_ID)
    subtask = await service.create_subtask(USER_ID, task["id"], {"title": "a"})
    toggled = await service.toggle_subtask(USER_ID, task["id"], subtask["id"])
    assert toggled["completed"] is True
    toggled = await service.toggle_subtask(USER_ID, task["id"], subtask["id"])
    assert toggled["completed"] is False


async def test_toggle_checks_parent_once(service: SubtaskService, store: InMemoryStore) -> None:
    task = store.add_task(USER_ID)
    subtask = await service.create_subtask(USER_ID, task["id"], {"title": "a"})
    store.calls.clear()
    await service.toggle_subtask(USER_ID, task["id"], subtask["id"])
    assert store.calls == ["tasks.exists", "subtasks.get", "subtasks.update"]


async def test_update_subtask_of_another_task_is_not_found(
    service: SubtaskService, store: InMemoryStore
) -> None:
    first = store.add_task(USER_ID)
    second = store.add_task(USER_ID)
    subtask = await service.create_subtask(USER_ID, first["id"], {"title": "a"})
    with pytest.raises(ResourceNotFoundException):
        await service.update_subtask(USER_ID, second["id"], subtask["id"], {"title": "b"})


async def test_list_is_ordered_by_position(service: SubtaskService, store: InMemoryStore) -> None:
    task = store.add_task(USER_ID)
    a = await service.create_subtask(USER_ID, task["id"], {"title": "a"})
    b = await service.create_subtask(USER_ID, task["id"], {"title": "b"})
    await service.update_subtask(USER_ID, task["id"], a["id"], {"position": 5})
    subtasks = await service.list_subtasks(USER_ID, task["id"])
    assert [s["id"] for s in subtasks] == [b["id"], a["id"]]


async def test_delete_subtask(service: SubtaskService, store: InMemoryStore) -> None:
    task = store.add_task(USER_ID)
    subtask = await service.create_subtask(USER_ID, task["id"], {"title": "a"})
    await service.delete_subtask(USER_ID, task["id"], subtask["id"])
    assert store.subtasks == {}
