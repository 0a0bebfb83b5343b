"""
Request logging middleware - one log line per request.
"""

import logging
import time
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """
    Middleware that logs method, path, status and latency for each request.

    Unhandled exceptions are logged with status 500 and re-raised so Django's
    normal error handling still applies.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        start = time.perf_counter()
        status = 500
        try:
            response = self.get_response(request)
            status = response.status_code
            return response
        finally:
            latency_ms = round((time.perf_counter() - start) * 1000.0, 2)
            logger.info(
                "%s %s %s %.2fms",
                request.method,
                request.path,
                status,
                latency_ms,
            )
