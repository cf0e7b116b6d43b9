"""Use cases: one service class per resource, constructed with its repositories."""

from taskflow.application.use_cases.analytics import AnalyticsService
from taskflow.application.use_cases.categories import CategoryService
from taskflow.application.use_cases.pomodoro import PomodoroService
from taskflow.application.use_cases.profile import ProfileService
from taskflow.application.use_cases.subtasks import SubtaskService
from taskflow.application.use_cases.tasks import TaskService

__all__ = [
    "AnalyticsService",
    "CategoryService",
    "PomodoroService",
    "ProfileService",
    "SubtaskService",
    "TaskService",
]
