"""Application DTOs (no transport or storage dependency)."""

from taskflow.application.dtos.analytics import (
    CategoryShare,
    PriorityBreakdown,
    ProductivityDay,
    TaskStatistics,
)
from taskflow.application.dtos.task import TaskFilters
from taskflow.application.dtos.user import AuthenticatedUser

__all__ = [
    "AuthenticatedUser",
    "CategoryShare",
    "PriorityBreakdown",
    "ProductivityDay",
    "TaskFilters",
    "TaskStatistics",
]
