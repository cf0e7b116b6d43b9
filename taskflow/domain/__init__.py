"""Domain layer: enums, exceptions, and task lifecycle rules.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from taskflow.domain.enums import (
    Priority,
    RecurrencePattern,
    StatisticsPeriod,
    TaskStatus,
    ThemePreference,
)
from taskflow.domain.exceptions import (
    AuthenticationException,
    CategoryInUseException,
    CategoryNameTakenException,
    ConflictException,
    IdentityProviderException,
    ResourceNotFoundException,
    StoreException,
    TaskflowException,
    UpstreamException,
    ValidationException,
)

__all__ = [
    # Enums
    "Priority",
    "RecurrencePattern",
    "StatisticsPeriod",
    "TaskStatus",
    "ThemePreference",
    # Exceptions
    "AuthenticationException",
    "CategoryInUseException",
    "CategoryNameTakenException",
    "ConflictException",
    "IdentityProviderException",
    "ResourceNotFoundException",
    "StoreException",
    "TaskflowException",
    "UpstreamException",
    "ValidationException",
]
