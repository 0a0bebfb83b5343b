"""
Contact API view - public endpoint for service inquiries.

The browser form validates before posting, but every request is validated
again here with the same schema.
"""

import json
import logging
from typing import Any

from django.core.exceptions import RequestDataTooBig
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from agency_schemas import (
    ContactErrorResponse,
    ContactSuccessResponse,
    ContactValidationErrorResponse,
    validate_inquiry,
)

from apps.web.contact.services import record_inquiry
from apps.web.core.decorators import cors_enabled

logger = logging.getLogger(__name__)


def _json_response(data: dict[str, Any], status: int = 200) -> JsonResponse:
    return JsonResponse(data, status=status)


def _error_response(error: str) -> JsonResponse:
    """Generic 500 body - never carries tracebacks or exception text."""
    response = ContactErrorResponse(error=error)
    return _json_response(response.model_dump(mode="json"), status=500)


@csrf_exempt
@cors_enabled
@require_POST
def submit_inquiry(request: HttpRequest) -> JsonResponse:
    """
    POST /api/contact

    Validates a service inquiry and acknowledges it.

    Responses:
    - 200: {success, message, data: {inquiryId, timestamp}}
    - 400: {success, message, errors: [{field, message}]}
    - 500: {success, message, error}
    """
    try:
        payload = json.loads(request.body)
    except RequestDataTooBig as e:
        logger.warning("Oversized contact submission body: %s", e)
        return _error_response("Request body too large")
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Malformed contact submission body: %s", e)
        return _error_response("Malformed JSON in request body")

    try:
        result = validate_inquiry(payload)
        if isinstance(result, list):
            logger.info(
                "Rejected contact submission: %s",
                ", ".join(err.field or "<body>" for err in result),
            )
            invalid = ContactValidationErrorResponse(errors=result)
            return _json_response(invalid.model_dump(mode="json"), status=400)

        receipt = record_inquiry(result)
    except Exception:
        logger.exception("Failed to process contact submission")
        return _error_response("Unexpected server error")

    response = ContactSuccessResponse(data=receipt)
    return _json_response(response.model_dump(mode="json", by_alias=True))
