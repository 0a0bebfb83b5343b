"""
Decorators for public API views.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any

from django.conf import settings
from django.http import HttpRequest, HttpResponse


def cors_headers() -> dict[str, str]:
    """CORS headers for browser access to the public API."""
    return {
        "Access-Control-Allow-Origin": settings.CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


def cors_enabled(view_func: Callable[..., HttpResponse]) -> Callable[..., HttpResponse]:
    """
    Decorator that adds CORS headers and answers preflight requests.

    OPTIONS requests get an empty 200 without reaching the view.

    Usage:
        @csrf_exempt
        @cors_enabled
        @require_POST
        def submit(request):
            ...
    """

    @wraps(view_func)
    def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        if request.method == "OPTIONS":
            response = HttpResponse(status=200)
        else:
            response = view_func(request, *args, **kwargs)

        for key, value in cors_headers().items():
            response[key] = value
        return response

    return wrapper
