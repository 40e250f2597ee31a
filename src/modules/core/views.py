import time
from typing import Any, Dict

import structlog
from django.core.cache import cache
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.core.apps import get_container

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    # Check ledger and session store
    container = get_container()
    if container is None:
        services["ledger"] = {"status": "down"}
        services["sessions"] = {"status": "down"}
        overall_healthy = False
        logger.error("health_check_container_missing")
    else:
        services["ledger"] = {"status": "up", "items": container.ledger.count()}
        services["sessions"] = {
            "status": "up",
            "active": container.sessions.active_count(),
        }

    # Check cache (backs request throttling)
    try:
        start = time.monotonic()
        cache.set("_health_check", "ok", 10)
        result = cache.get("_health_check")
        if result != "ok":
            raise ConnectionError("Cache read failed")
        services["cache"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except Exception:
        services["cache"] = {"status": "down"}
        overall_healthy = False
        logger.error("health_check_cache_failure")

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
