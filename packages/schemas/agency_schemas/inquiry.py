"""Service inquiry schema and validation.

The same rules run in the contact form controller (live feedback and the
pre-submit check) and in the ``/api/contact`` endpoint, so both sides of
the network boundary agree on what a valid inquiry is.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator

from agency_schemas.categories import Budget, ServiceCategory, Timeline

INQUIRY_ID_PREFIX = "INQ"

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
MESSAGE_MIN_LENGTH = 10
MESSAGE_MAX_LENGTH = 1000

# Wire field name -> label used in error messages
FIELD_LABELS: dict[str, str] = {
    "name": "Name",
    "email": "Email",
    "company": "Company",
    "phone": "Phone",
    "serviceCategory": "Service category",
    "message": "Message",
    "budget": "Budget",
    "timeline": "Timeline",
}

INQUIRY_FIELDS: tuple[str, ...] = tuple(FIELD_LABELS)

_ENUM_CHOICES: dict[str, str] = {
    "serviceCategory": "service categories",
    "budget": "budget ranges",
    "timeline": "project timelines",
}


class FieldError(BaseModel):
    """A single field-level validation failure."""

    field: str
    message: str


class ServiceInquiry(BaseModel):
    """Service inquiry submitted through the contact form."""

    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    email: EmailStr
    company: str | None = None
    phone: str | None = None
    service_category: ServiceCategory = Field(alias="serviceCategory")
    message: str = Field(min_length=MESSAGE_MIN_LENGTH, max_length=MESSAGE_MAX_LENGTH)
    budget: Budget | None = None
    timeline: Timeline | None = None

    @field_validator("company", "phone", "budget", "timeline", mode="before")
    @classmethod
    def _blank_is_absent(cls, value: Any) -> Any:
        # Unselected <select> elements and empty inputs post ""
        if value == "":
            return None
        return value

    def to_payload(self) -> dict[str, Any]:
        """Wire representation, optional fields omitted when absent."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def _describe(error: dict[str, Any]) -> FieldError:
    """Turn a pydantic error into a user-facing FieldError."""
    field = ".".join(str(loc) for loc in error["loc"])
    label = FIELD_LABELS.get(field, field or "Inquiry")
    ctx = error.get("ctx") or {}

    match error["type"]:
        case "missing":
            message = f"{label} is required"
        case "string_too_short":
            message = f"{label} must be at least {ctx['min_length']} characters"
        case "string_too_long":
            message = f"{label} must be at most {ctx['max_length']} characters"
        case "string_type":
            message = f"{label} must be text"
        case "enum":
            choices = _ENUM_CHOICES.get(field, "allowed values")
            message = f"{label} must be one of the recognized {choices}"
        case "model_type" | "model_attributes_type" | "dict_type":
            message = "Inquiry must be a JSON object"
        case "value_error" if field == "email":
            message = "Invalid email address"
        case _:
            message = error["msg"]

    return FieldError(field=field, message=message)


def validate_inquiry(candidate: Any) -> ServiceInquiry | list[FieldError]:
    """
    Validate an unstructured record as a ServiceInquiry.

    Every field is checked; all violations are returned together, in field
    order. Unknown keys are ignored. Enumerated values must match exactly.

    Args:
        candidate: Decoded JSON body or form values.

    Returns:
        The validated inquiry, or the list of field errors.
    """
    try:
        return ServiceInquiry.model_validate(candidate)
    except ValidationError as e:
        return [_describe(err) for err in e.errors()]


def validate_field(field: str, value: Any) -> str | None:
    """
    Validate a single field in isolation.

    A value of None is treated as the field being absent, so required
    fields report "is required" and optional fields pass.

    Returns:
        The error message for the field, or None if the value is valid.

    Raises:
        KeyError: If ``field`` is not an inquiry field.
    """
    if field not in FIELD_LABELS:
        raise KeyError(f"Unknown inquiry field: {field}")

    result = validate_inquiry({} if value is None else {field: value})
    if isinstance(result, ServiceInquiry):
        return None

    for error in result:
        if error.field == field or error.field.startswith(f"{field}."):
            return error.message
    return None


def new_inquiry_reference(submitted_at: datetime) -> str:
    """Reference token for an inquiry: prefix plus epoch milliseconds."""
    return f"{INQUIRY_ID_PREFIX}-{int(submitted_at.timestamp() * 1000)}"
