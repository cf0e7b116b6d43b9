"""In-memory repositories and identity provider for tests.

All repositories share one InMemoryStore so cross-table behaviour (task
relations, the category guard) matches the datastore. Every repository call
is recorded in ``store.calls`` so tests can assert that nothing touched the
store.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from taskflow.application.dtos.task import TaskFilters
from taskflow.application.dtos.user import AuthenticatedUser
from taskflow.domain.enums import TaskStatus
from taskflow.shared.utils.datetime import parse_timestamp, to_iso, utc_now

Row = dict[str, Any]

USER_ID = "11111111-1111-1111-1111-111111111111"
OTHER_USER_ID = "22222222-2222-2222-2222-222222222222"
VALID_TOKEN = "valid-token"
OTHER_TOKEN = "other-token"


class InMemoryStore:
    """Rows per table plus a log of repository calls."""

    def __init__(self) -> None:
        self.tasks: dict[str, Row] = {}
        self.subtasks: dict[str, Row] = {}
        self.categories: dict[str, Row] = {}
        self.profiles: dict[str, Row] = {}
        self.pomodoro_sessions: dict[str, Row] = {}
        self.activity_log: list[Row] = []
        self.statistics: Any = None
        self.calls: list[str] = []

    def record(self, name: str) -> None:
        self.calls.append(name)

    def add_task(self, user_id: str, **fields: Any) -> Row:
        """Seed a task directly, bypassing the service."""
        task_id = fields.pop("id", None) or str(uuid.uuid4())
        row: Row = {
            "id": task_id,
            "user_id": user_id,
            "title": "Task",
            "description": None,
            "category_id": None,
            "priority": "medium",
            "status": "pending",
            "start_date": None,
            "estimated_time": None,
            "tempo_real": None,
            "completed_at": None,
            "tags": [],
            "attachments": [],
            "position": len([t for t in self.tasks.values() if t["user_id"] == user_id]),
            "created_at": to_iso(utc_now()),
        }
        row.update(fields)
        self.tasks[task_id] = row
        return row

    def add_category(self, user_id: str, name: str, **fields: Any) -> Row:
        category_id = fields.pop("id", None) or str(uuid.uuid4())
        row: Row = {
            "id": category_id,
            "user_id": user_id,
            "name": name,
            "color": "#3B82F6",
            "icon": "📁",
            "created_at": to_iso(utc_now()),
        }
        row.update(fields)
        self.categories[category_id] = row
        return row


def _new_id() -> str:
    return str(uuid.uuid4())


class FakeTaskRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _with_relations(self, task: Row) -> Row:
        row = dict(task)
        row["category"] = self.store.categories.get(task.get("category_id") or "")
        row["subtasks"] = sorted(
            (s for s in self.store.subtasks.values() if s["task_id"] == task["id"]),
            key=lambda s: s["position"],
        )
        return row

    def _owned(self, user_id: str) -> list[Row]:
        return [t for t in self.store.tasks.values() if t["user_id"] == user_id]

    async def list_filtered(self, user_id: str, filters: TaskFilters) -> list[Row]:
        self.store.record("tasks.list_filtered")
        rows = self._owned(user_id)
        if filters.status:
            rows = [t for t in rows if t["status"] == filters.status]
        if filters.priority:
            rows = [t for t in rows if t["priority"] == filters.priority]
        if filters.category_id:
            rows = [t for t in rows if t["category_id"] == filters.category_id]
        if filters.search:
            term = filters.search.lower()
            rows = [
                t
                for t in rows
                if term in (t.get("title") or "").lower()
                or term in (t.get("description") or "").lower()
            ]
        if filters.tags:
            rows = [t for t in rows if set(filters.tags) <= set(t.get("tags") or [])]
        return [self._with_relations(t) for t in sorted(rows, key=lambda t: t["position"])]

    async def get(self, user_id: str, task_id: str) -> Row | None:
        self.store.record("tasks.get")
        task = self.store.tasks.get(task_id)
        if task is None or task["user_id"] != user_id:
            return None
        return self._with_relations(task)

    async def exists(self, user_id: str, task_id: str) -> bool:
        self.store.record("tasks.exists")
        task = self.store.tasks.get(task_id)
        return task is not None and task["user_id"] == user_id

    async def last_position(self, user_id: str) -> int | None:
        self.store.record("tasks.last_position")
        positions = [t["position"] for t in self._owned(user_id)]
        return max(positions) if positions else None

    async def create(self, values: Row) -> Row:
        self.store.record("tasks.create")
        row = {
            "id": _new_id(),
            "created_at": to_iso(utc_now()),
            "completed_at": None,
            "tempo_real": None,
            **values,
        }
        self.store.tasks[row["id"]] = row
        return self._with_relations(row)

    async def update(self, user_id: str, task_id: str, values: Row) -> Row | None:
        self.store.record("tasks.update")
        task = self.store.tasks.get(task_id)
        if task is None or task["user_id"] != user_id:
            return None
        task.update(values)
        return self._with_relations(task)

    async def set_position(self, user_id: str, task_id: str, position: int) -> None:
        self.store.record("tasks.set_position")
        task = self.store.tasks.get(task_id)
        if task is not None and task["user_id"] == user_id:
            task["position"] = position

    async def delete(self, user_id: str, task_id: str) -> None:
        self.store.record("tasks.delete")
        task = self.store.tasks.get(task_id)
        if task is not None and task["user_id"] == user_id:
            del self.store.tasks[task_id]

    async def list_unfinished_with_estimate(self, user_id: str) -> list[Row]:
        self.store.record("tasks.list_unfinished_with_estimate")
        return [
            self._with_relations(t)
            for t in self._owned(user_id)
            if t["status"] != TaskStatus.COMPLETED and t.get("estimated_time") is not None
        ]

    async def list_in_window(self, user_id: str, start: datetime, end: datetime) -> list[Row]:
        self.store.record("tasks.list_in_window")
        rows = []
        for task in self._owned(user_id):
            for key in ("created_at", "start_date"):
                value = parse_timestamp(task.get(key))
                if value is not None and start <= value < end:
                    rows.append(self._with_relations(task))
                    break
        return rows

    async def list_created_since(self, user_id: str, since: datetime) -> list[Row]:
        self.store.record("tasks.list_created_since")
        return [t for t in self._owned(user_id) if parse_timestamp(t["created_at"]) >= since]

    async def list_completed_since(self, user_id: str, since: datetime) -> list[Row]:
        self.store.record("tasks.list_completed_since")
        rows = [
            t
            for t in self._owned(user_id)
            if t["status"] == TaskStatus.COMPLETED
            and t.get("completed_at")
            and parse_timestamp(t["completed_at"]) >= since
        ]
        return sorted(rows, key=lambda t: parse_timestamp(t["completed_at"]))

    async def list_with_category(self, user_id: str) -> list[Row]:
        self.store.record("tasks.list_with_category")
        return [self._with_relations(t) for t in self._owned(user_id)]

    async def any_in_category(self, category_id: str) -> bool:
        self.store.record("tasks.any_in_category")
        return any(t.get("category_id") == category_id for t in self.store.tasks.values())


class FakeSubtaskRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _find(self, task_id: str, subtask_id: str) -> Row | None:
        subtask = self.store.subtasks.get(subtask_id)
        if subtask is None or subtask["task_id"] != task_id:
            return None
        return subtask

    async def list_for_task(self, task_id: str) -> list[Row]:
        self.store.record("subtasks.list_for_task")
        rows = [s for s in self.store.subtasks.values() if s["task_id"] == task_id]
        return sorted(rows, key=lambda s: s["position"])

    async def get(self, task_id: str, subtask_id: str) -> Row | None:
        self.store.record("subtasks.get")
        return self._find(task_id, subtask_id)

    async def last_position(self, task_id: str) -> int | None:
        self.store.record("subtasks.last_position")
        positions = [s["position"] for s in self.store.subtasks.values() if s["task_id"] == task_id]
        return max(positions) if positions else None

    async def create(self, values: Row) -> Row:
        self.store.record("subtasks.create")
        row = {"id": _new_id(), "completed": False, "created_at": to_iso(utc_now()), **values}
        self.store.subtasks[row["id"]] = row
        return dict(row)

    async def update(self, task_id: str, subtask_id: str, values: Row) -> Row | None:
        self.store.record("subtasks.update")
        subtask = self._find(task_id, subtask_id)
        if subtask is None:
            return None
        subtask.update(values)
        return dict(subtask)

    async def delete(self, task_id: str, subtask_id: str) -> None:
        self.store.record("subtasks.delete")
        if self._find(task_id, subtask_id) is not None:
            del self.store.subtasks[subtask_id]


class FakeCategoryRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _owned(self, user_id: str, category_id: str) -> Row | None:
        category = self.store.categories.get(category_id)
        if category is None or category["user_id"] != user_id:
            return None
        return category

    async def list_for_owner(self, user_id: str) -> list[Row]:
        self.store.record("categories.list_for_owner")
        rows = [c for c in self.store.categories.values() if c["user_id"] == user_id]
        return sorted(rows, key=lambda c: c["created_at"])

    async def get(self, user_id: str, category_id: str) -> Row | None:
        self.store.record("categories.get")
        return self._owned(user_id, category_id)

    async def find_by_name(
        self, user_id: str, name: str, exclude_id: str | None = None
    ) -> Row | None:
        self.store.record("categories.find_by_name")
        for category in self.store.categories.values():
            if category["user_id"] == user_id and category["name"] == name:
                if category["id"] != exclude_id:
                    return category
        return None

    async def create(self, values: Row) -> Row:
        self.store.record("categories.create")
        row = {"id": _new_id(), "created_at": to_iso(utc_now()), **values}
        self.store.categories[row["id"]] = row
        return dict(row)

    async def update(self, user_id: str, category_id: str, values: Row) -> Row | None:
        self.store.record("categories.update")
        category = self._owned(user_id, category_id)
        if category is None:
            return None
        category.update(values)
        return dict(category)

    async def delete(self, user_id: str, category_id: str) -> None:
        self.store.record("categories.delete")
        if self._owned(user_id, category_id) is not None:
            del self.store.categories[category_id]


class FakeProfileRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def get(self, user_id: str) -> Row | None:
        self.store.record("profiles.get")
        return self.store.profiles.get(user_id)

    async def update(self, user_id: str, values: Row) -> Row | None:
        self.store.record("profiles.update")
        profile = self.store.profiles.get(user_id)
        if profile is None:
            return None
        profile.update(values)
        return dict(profile)


class FakePomodoroRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def list_recent(self, user_id: str, limit: int) -> list[Row]:
        self.store.record("pomodoro.list_recent")
        rows = [s for s in self.store.pomodoro_sessions.values() if s["user_id"] == user_id]
        rows.sort(key=lambda s: s["started_at"], reverse=True)
        return rows[:limit]

    async def create(self, values: Row) -> Row:
        self.store.record("pomodoro.create")
        row = {"id": _new_id(), "completed_at": None, **values}
        self.store.pomodoro_sessions[row["id"]] = row
        return dict(row)

    async def complete(self, user_id: str, session_id: str, completed_at: datetime) -> Row | None:
        self.store.record("pomodoro.complete")
        session = self.store.pomodoro_sessions.get(session_id)
        if session is None or session["user_id"] != user_id:
            return None
        session.update({"completed": True, "completed_at": to_iso(completed_at)})
        return dict(session)


class FakeActivityLogRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def list_page(self, user_id: str, limit: int, offset: int) -> list[Row]:
        self.store.record("activity.list_page")
        rows = [a for a in self.store.activity_log if a["user_id"] == user_id]
        rows.sort(key=lambda a: a["created_at"], reverse=True)
        return rows[offset : offset + limit]


class FakeStatisticsRepository:
    """Returns ``store.statistics``; raises it when it is an exception."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def task_statistics(self, user_id: str, period: str) -> Any:
        self.store.record("statistics.task_statistics")
        if isinstance(self.store.statistics, Exception):
            raise self.store.statistics
        return self.store.statistics


class FakeIdentityProvider:
    """Maps bearer tokens to users; records deleted accounts."""

    def __init__(self, users: dict[str, AuthenticatedUser] | None = None) -> None:
        self.users = dict(users or {})
        self.deleted: list[str] = []

    async def get_user(self, token: str) -> AuthenticatedUser | None:
        return self.users.get(token)

    async def delete_user(self, user_id: str) -> None:
        self.deleted.append(user_id)
