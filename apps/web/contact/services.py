"""
Contact services - acknowledgment of validated inquiries.

Inquiries are written to the operational log and then discarded. This is
where storage or notification delivery would hook in.
"""

import logging
from datetime import UTC, datetime

from agency_schemas import InquiryReceipt, ServiceInquiry, new_inquiry_reference

logger = logging.getLogger(__name__)


def record_inquiry(
    inquiry: ServiceInquiry, received_at: datetime | None = None
) -> InquiryReceipt:
    """
    Acknowledge a validated inquiry.

    Args:
        inquiry: The validated service inquiry.
        received_at: Submission time (defaults to now, UTC).

    Returns:
        Receipt with a freshly generated inquiry reference.
    """
    received_at = received_at or datetime.now(UTC)
    receipt = InquiryReceipt(
        inquiry_id=new_inquiry_reference(received_at),
        timestamp=received_at,
    )

    logger.info(
        "New service inquiry %s: name=%s email=%s category=%s budget=%s timeline=%s",
        receipt.inquiry_id,
        inquiry.name,
        inquiry.email,
        inquiry.service_category.value,
        inquiry.budget.value if inquiry.budget else "-",
        inquiry.timeline.value if inquiry.timeline else "-",
    )

    return receipt
