"""Health & Readiness Probes: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 unless both store and cache answer a ping
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from values_service.api.dependencies import get_cache, get_db_manager
from values_service.core.errors import CacheError
from values_service.infrastructure.cache import RedisValueCache
from values_service.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "values-service"}


@router.get("/ready")
async def readiness_check(
    db: DatabaseSessionManager = Depends(get_db_manager),
    cache: RedisValueCache = Depends(get_cache),
):
    """Readiness probe: store and cache connectivity."""
    checks = {
        "database": "healthy" if await db.health_check() else "unavailable",
        "cache": "healthy",
    }
    try:
        await cache.ping()
    except CacheError as e:
        logger.warning(f"Cache health check failed: {e.message}")
        checks["cache"] = "unavailable"
    if "unavailable" in checks.values():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": checks},
        )
    return {"status": "ready", "checks": checks}
