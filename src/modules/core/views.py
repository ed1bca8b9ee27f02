import time
from typing import Any, Dict

import structlog
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.core.exceptions import (
    ROUTE_NOT_FOUND_MESSAGE,
    RouteNotFound,
    build_error_payload,
    current_error_id,
)

logger = structlog.get_logger(__name__)


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        services["database"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except DatabaseError:
        services["database"] = {"status": "down"}
        overall_healthy = False
        logger.error("health_check_db_failure", exc_info=True)

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )


def route_not_found(request: HttpRequest, exception: Exception) -> JsonResponse:
    """``handler404``: unmatched URLs get the same error body as API errors."""
    error_id = current_error_id()
    payload, status_code = build_error_payload(
        RouteNotFound(ROUTE_NOT_FOUND_MESSAGE), request.path, error_id
    )
    logger.warning(
        "request.error",
        error_id=error_id,
        path=request.path,
        status_code=status_code,
        error_type="RouteNotFound",
    )
    return JsonResponse(payload, status=status_code)
