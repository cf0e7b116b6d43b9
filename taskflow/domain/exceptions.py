"""Domain exceptions for the TaskFlow application.

Defines domain-level exceptions that represent business rule violations
and upstream failures. Presentation layer maps them to HTTP responses in
exception handlers (taskflow.core.exception_handlers).
"""

from typing import Any


class TaskflowException(Exception):
    """Base exception for all TaskFlow application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(TaskflowException):
    """Raised when input validation fails outside the request schemas."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(TaskflowException):
    """Raised when the bearer token is missing, invalid, or expired."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(TaskflowException):
    """Raised when a resource is absent or not owned by the caller."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task', 'category').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type.capitalize()} not found",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ConflictException(TaskflowException):
    """Raised when a write would break an ownership-scoped business rule."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "CONFLICT", details)


class CategoryNameTakenException(ConflictException):
    """Raised when the owner already has a category with this name."""

    def __init__(self, name: str) -> None:
        super().__init__(
            "A category with this name already exists",
            {"name": name},
        )


class CategoryInUseException(ConflictException):
    """Raised when deleting a category that tasks still reference."""

    def __init__(self, category_id: str) -> None:
        super().__init__(
            "Cannot delete a category that has tasks. Move or delete the tasks first.",
            {"category_id": category_id},
        )


class UpstreamException(TaskflowException):
    """Raised when the datastore or identity provider reports a failure.

    The upstream message is kept on the exception; the exception handler
    decides whether to expose it (never in production).
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        merged = dict(details or {})
        if status_code is not None:
            merged["upstream_status"] = status_code
        super().__init__(message, "UPSTREAM_ERROR", merged)


class StoreException(UpstreamException):
    """Datastore (PostgREST / RPC) request failed."""


class IdentityProviderException(UpstreamException):
    """Identity provider (token validation, admin user API) request failed."""
