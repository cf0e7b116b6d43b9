"""Category use cases: per-owner name uniqueness and the delete-while-referenced guard.

Both checks are read-then-write; two concurrent requests can still slip past them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from taskflow.domain.exceptions import (
    CategoryInUseException,
    CategoryNameTakenException,
    ResourceNotFoundException,
)

if TYPE_CHECKING:
    from taskflow.application.interfaces.repositories import (
        ICategoryRepository,
        ITaskRepository,
    )

logger = logging.getLogger(__name__)

Row = dict[str, Any]

DEFAULT_COLOR = "#3B82F6"
DEFAULT_ICON = "📁"


class CategoryService:
    """Owner-scoped categories."""

    def __init__(self, category_repo: ICategoryRepository, task_repo: ITaskRepository) -> None:
        self.category_repo = category_repo
        self.task_repo = task_repo

    async def list_categories(self, user_id: str) -> list[Row]:
        return await self.category_repo.list_for_owner(user_id)

    async def get_category(self, user_id: str, category_id: str) -> Row:
        category = await self.category_repo.get(user_id, category_id)
        if category is None:
            raise ResourceNotFoundException("category", category_id)
        return category

    async def create_category(self, user_id: str, data: Row) -> Row:
        name = data["name"]
        if await self.category_repo.find_by_name(user_id, name) is not None:
            logger.info("Rejected duplicate category name %r", name)
            raise CategoryNameTakenException(name)
        return await self.category_repo.create(
            {
                "name": name,
                "color": data.get("color") or DEFAULT_COLOR,
                "icon": data.get("icon") or DEFAULT_ICON,
                "user_id": user_id,
            }
        )

    async def update_category(self, user_id: str, category_id: str, changes: Row) -> Row:
        await self.get_category(user_id, category_id)
        name = changes.get("name")
        if name and await self.category_repo.find_by_name(user_id, name, exclude_id=category_id):
            logger.info("Rejected rename of category %s to duplicate %r", category_id, name)
            raise CategoryNameTakenException(name)
        category = await self.category_repo.update(user_id, category_id, changes)
        if category is None:
            raise ResourceNotFoundException("category", category_id)
        return category

    async def delete_category(self, user_id: str, category_id: str) -> None:
        """Delete unless any task still references the category."""
        if await self.task_repo.any_in_category(category_id):
            logger.info("Refused to delete category %s: tasks still reference it", category_id)
            raise CategoryInUseException(category_id)
        await self.category_repo.delete(user_id, category_id)
