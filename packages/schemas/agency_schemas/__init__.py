"""Agency Schemas - Pydantic models for data contracts."""

from agency_schemas.categories import (
    BUDGET_LABELS,
    CATEGORY_INFO,
    Budget,
    CategoryInfo,
    ServiceCategory,
    Technology,
    Timeline,
)
from agency_schemas.contact import (
    ContactErrorResponse,
    ContactSuccessResponse,
    ContactValidationErrorResponse,
    InquiryReceipt,
)
from agency_schemas.inquiry import (
    FIELD_LABELS,
    INQUIRY_FIELDS,
    INQUIRY_ID_PREFIX,
    FieldError,
    ServiceInquiry,
    new_inquiry_reference,
    validate_field,
    validate_inquiry,
)

__all__ = [
    # Categories
    "BUDGET_LABELS",
    "CATEGORY_INFO",
    "Budget",
    "CategoryInfo",
    "ServiceCategory",
    "Technology",
    "Timeline",
    # Inquiry
    "FIELD_LABELS",
    "INQUIRY_FIELDS",
    "INQUIRY_ID_PREFIX",
    "FieldError",
    "ServiceInquiry",
    "new_inquiry_reference",
    "validate_field",
    "validate_inquiry",
    # Contact API
    "ContactErrorResponse",
    "ContactSuccessResponse",
    "ContactValidationErrorResponse",
    "InquiryReceipt",
]
