"""CategoryService unit tests: name uniqueness and the in-use guard."""

import pytest

from fakes import OTHER_USER_ID, USER_ID, FakeCategoryRepository, FakeTaskRepository, InMemoryStore
from taskflow.application.use_cases.categories import CategoryService
from taskflow.domain.exceptions import (
    CategoryInUseException,
    CategoryNameTakenException,
    ConflictException,
    ResourceNotFoundException,
)


@pytest.fixture
def service(
    category_repo: FakeCategoryRepository, task_repo: FakeTaskRepository
) -> CategoryService:
    return CategoryService(category_repo, task_repo)


async def test_create_applies_defaults(service: CategoryService) -> None:
    category = await service.create_category(USER_ID, {"name": "Work"})
    assert category["color"] == "#3B82F6"
    assert category["icon"] == "📁"
    assert category["user_id"] == USER_ID


async def test_create_rejects_duplicate_name_for_same_owner(
    service: CategoryService, store: InMemoryStore
) -> None:
    store.add_category(USER_ID, "Work")
    with pytest.raises(CategoryNameTakenException) as exc_info:
        await service.create_category(USER_ID, {"name": "Work"})
    assert exc_info.value.error_code == "CONFLICT"


async def test_same_name_is_allowed_across_owners(
    service: CategoryService, store: InMemoryStore
) -> None:
    store.add_category(OTHER_USER_ID, "Work")
    category = await service.create_category(USER_ID, {"name": "Work"})
    assert category["name"] == "Work"


async def test_rename_to_own_name_is_allowed(
    service: CategoryService, store: InMemoryStore
) -> None:
    category = store.add_category(USER_ID, "Work")
    updated = await service.update_category(USER_ID, category["id"], {"name": "Work"})
    assert updated["name"] == "Work"


async def test_rename_to_sibling_name_is_rejected(
    service: CategoryService, store: InMemoryStore
) -> None:
    store.add_category(USER_ID, "Home")
    category = store.add_category(USER_ID, "Work")
    with pytest.raises(ConflictException):
        await service.update_category(USER_ID, category["id"], {"name": "Home"})


async def test_update_foreign_category_is_not_found(
    service: CategoryService, store: InMemoryStore
) -> None:
    category = store.add_category(OTHER_USER_ID, "Work")
    with pytest.raises(ResourceNotFoundException):
        await service.update_category(USER_ID, category["id"], {"color": "#000000"})


async def test_delete_unreferenced_category(
    service: CategoryService, store: InMemoryStore
) -> None:
    category = store.add_category(USER_ID, "Work")
    await service.delete_category(USER_ID, category["id"])
    assert category["id"] not in store.categories


async def test_delete_referenced_category_is_refused_and_nothing_changes(
    service: CategoryService, store: InMemoryStore
) -> None:
    category = store.add_category(USER_ID, "Work")
    task = store.add_task(USER_ID, category_id=category["id"])
    with pytest.raises(CategoryInUseException):
        await service.delete_category(USER_ID, category["id"])
    assert category["id"] in store.categories
    assert store.tasks[task["id"]]["category_id"] == category["id"]
