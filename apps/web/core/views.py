"""
Core views - service health.
"""

from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET


@require_GET
def health(_request: HttpRequest) -> JsonResponse:
    """
    GET /health

    Liveness check for load balancers and uptime monitors.
    """
    return JsonResponse({"status": "ok"})
