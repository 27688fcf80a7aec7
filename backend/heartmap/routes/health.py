"""
HeartMap Backend — Health Check Route
======================================

What:  Health check endpoint for monitoring and load balancer checks.
How:   Runs SELECT 1 against the store and reports uptime and version.

Status levels:
    healthy:   database reachable (HTTP 200)
    unhealthy: database unreachable (HTTP 200, status flag set)

The geocoder is not checked: marker creation succeeds without it, and a
lookup per check would spend Nominatim's request quota.
"""

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text

from heartmap import __version__
from heartmap.schemas.heart import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        from heartmap.database import engine
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
