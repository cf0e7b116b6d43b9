"""Application interfaces (ports) implemented by infrastructure."""

from taskflow.application.interfaces.repositories import (
    IActivityLogRepository,
    ICategoryRepository,
    IIdentityProvider,
    IPomodoroRepository,
    IProfileRepository,
    IStatisticsRepository,
    ISubtaskRepository,
    ITaskRepository,
)

__all__ = [
    "IActivityLogRepository",
    "ICategoryRepository",
    "IIdentityProvider",
    "IPomodoroRepository",
    "IProfileRepository",
    "IStatisticsRepository",
    "ISubtaskRepository",
    "ITaskRepository",
]
