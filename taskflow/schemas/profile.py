"""Profile API schemas."""

from typing import ClassVar, Literal

from pydantic import Field

from taskflow.domain.enums import ThemePreference
from taskflow.schemas.common import HEX_COLOR_PATTERN, HttpUrlStr, PartialUpdateModel


class ProfileUpdateRequest(PartialUpdateModel):
    """Request body for PUT/PATCH /profile (partial)."""

    non_nullable: ClassVar[tuple[str, ...]] = (
        "theme_preference",
        "custom_color",
        "notifications_enabled",
    )

    full_name: str | None = Field(default=None, max_length=255)
    avatar_url: HttpUrlStr | Literal[""] | None = None
    theme_preference: ThemePreference | None = None
    custom_color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)
    notifications_enabled: bool | None = None
