"""Contact API response schemas.

Shared by the ``/api/contact`` endpoint (to build responses) and the form
controller's HTTP client (to parse them).
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from agency_schemas.inquiry import FieldError


class InquiryReceipt(BaseModel):
    """Acknowledgment data for an accepted inquiry."""

    model_config = ConfigDict(populate_by_name=True)

    inquiry_id: str = Field(alias="inquiryId", pattern=r"^INQ-\d+$")
    timestamp: datetime


class ContactSuccessResponse(BaseModel):
    """200 response: inquiry accepted."""

    success: Literal[True] = True
    message: str = "Form submitted successfully"
    data: InquiryReceipt


class ContactValidationErrorResponse(BaseModel):
    """400 response: one or more fields failed validation."""

    success: Literal[False] = False
    message: str = "Validation error"
    errors: list[FieldError]


class ContactErrorResponse(BaseModel):
    """500 response: the request could not be processed."""

    success: Literal[False] = False
    message: str = "An error occurred while processing your request"
    error: str
