"""Response envelopes and shared field constraints."""

from typing import Annotated, Any, ClassVar, Generic, TypeVar

from pydantic import (
    AfterValidator,
    AnyHttpUrl,
    AnyUrl,
    BaseModel,
    ConfigDict,
    TypeAdapter,
    ValidationError,
    model_validator,
)

T = TypeVar("T")

HEX_COLOR_PATTERN = r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$"

Row = dict[str, Any]


def _url_checked_by(adapter: TypeAdapter):
    """Validator that rejects a malformed URL but keeps the client's exact text."""

    def check(value: str) -> str:
        try:
            adapter.validate_python(value)
        except ValidationError as e:
            raise ValueError(e.errors()[0]["msg"]) from e
        return value

    return check


# Validated as URLs, kept exactly as the client sent them.
UrlStr = Annotated[str, AfterValidator(_url_checked_by(TypeAdapter(AnyUrl)))]
HttpUrlStr = Annotated[str, AfterValidator(_url_checked_by(TypeAdapter(AnyHttpUrl)))]


class StrictModel(BaseModel):
    """Request body base: unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class PartialUpdateModel(StrictModel):
    """Request body for PUT/PATCH partial updates.

    At least one field must be present; fields in ``non_nullable`` may be
    omitted but not sent as null.
    """

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def check_fields(self):
        if not self.model_fields_set:
            raise ValueError("at least one field must be provided")
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> Row:
        """Only the fields the client sent, JSON-ready for the datastore."""
        return self.model_dump(mode="json", exclude_unset=True)


class Envelope(BaseModel, Generic[T]):
    """Success envelope: ``{"success": true, "data": ..., "message": ...}``."""

    success: bool = True
    data: T | None = None
    message: str | None = None


class FieldError(BaseModel):
    """One validation failure."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Failure envelope: ``{"success": false, "error": ..., "details": [...]}``."""

    success: bool = False
    error: str
    details: list[FieldError] | None = None


def ok(data: Any = None, message: str | None = None) -> Row:
    """Build a success envelope; message and data are omitted when not given."""
    body: Row = {"success": True}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    return body
