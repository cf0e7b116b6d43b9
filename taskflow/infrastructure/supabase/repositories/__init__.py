"""Supabase repository implementations of the application ports."""

from taskflow.infrastructure.supabase.repositories.category_repo import (
    SupabaseCategoryRepository,
)
from taskflow.infrastructure.supabase.repositories.pomodoro_repo import (
    SupabaseActivityLogRepository,
    SupabasePomodoroRepository,
)
from taskflow.infrastructure.supabase.repositories.profile_repo import (
    SupabaseProfileRepository,
)
from taskflow.infrastructure.supabase.repositories.statistics_repo import (
    SupabaseStatisticsRepository,
)
from taskflow.infrastructure.supabase.repositories.subtask_repo import (
    SupabaseSubtaskRepository,
)
from taskflow.infrastructure.supabase.repositories.task_repo import SupabaseTaskRepository

__all__ = [
    "SupabaseActivityLogRepository",
    "SupabaseCategoryRepository",
    "SupabasePomodoroRepository",
    "SupabaseProfileRepository",
    "SupabaseStatisticsRepository",
    "SupabaseSubtaskRepository",
    "SupabaseTaskRepository",
]
