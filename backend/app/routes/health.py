"""
Commerce Backend — Health Check Route
======================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Runs SELECT 1 against the store and reports aggregate status.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   Database reachable (HTTP 200)
    - unhealthy: Database unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Request, Response

from app import __version__
from app.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request, response: Response) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        await request.app.state.database.ping()
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        environment=request.app.state.settings.environment,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
