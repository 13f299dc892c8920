"""
Promptopia Backend — Health Check Route
=========================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Ensures the database connector is up and runs SELECT 1.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   Database reachable
    - unhealthy: Database unreachable (the lookup endpoint would return 500)

The endpoint always answers 200; the verdict is in the body.
"""

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text

from app import __version__
from app.database import connect_to_db
from app.schemas.prompt import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns the health status of the backend service and its database.",
)
async def health_check() -> HealthResponse:
    """Probe database connectivity and report aggregate status with uptime."""
    db_status = "connected"
    overall = "healthy"

    try:
        engine = await connect_to_db()
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
