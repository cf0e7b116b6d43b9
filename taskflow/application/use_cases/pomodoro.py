"""Pomodoro session use cases."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any

from taskflow.domain.exceptions import ResourceNotFoundException
from taskflow.shared.utils.datetime import to_iso, utc_now

if TYPE_CHECKING:
    from taskflow.application.interfaces.repositories import IPomodoroRepository

Row = dict[str, Any]


class PomodoroService:
    """Focus sessions, optionally tied to a task."""

    def __init__(
        self,
        pomodoro_repo: IPomodoroRepository,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.pomodoro_repo = pomodoro_repo
        self.clock = clock

    async def list_sessions(self, user_id: str, limit: int = 20) -> list[Row]:
        return await self.pomodoro_repo.list_recent(user_id, limit)

    async def start_session(self, user_id: str, duration: int, task_id: str | None = None) -> Row:
        return await self.pomodoro_repo.create(
            {
                "user_id": user_id,
                "task_id": task_id or None,
                "duration": duration,
                "started_at": to_iso(self.clock()),
                "completed": False,
            }
        )

    async def complete_session(self, user_id: str, session_id: str) -> Row:
        session = await self.pomodoro_repo.complete(user_id, session_id, self.clock())
        if session is None:
            raise ResourceNotFoundException("pomodoro session", session_id)
        return session
