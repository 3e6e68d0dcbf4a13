# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

import logging
from datetime import datetime, timezone

from pydantic import BaseModel

from app import VERSION
from app.context import ContextDep
from app.routing import Route, build_router

logger = logging.getLogger(__name__)


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ChecksResponse(BaseModel):
    """Individual service checks."""
    database: str
    uploads: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    checks: ChecksResponse
    timestamp: str


class LivenessResponse(BaseModel):
    """Liveness check response."""
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

async def health_check(ctx: ContextDep) -> HealthResponse:
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=ctx.settings.ENVIRONMENT,
        version=VERSION,
    )


async def readiness_check(ctx: ContextDep) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Checks database connectivity and that the upload directory exists.
    """
    checks = ChecksResponse(database="unknown", uploads="unknown")

    try:
        ctx.db.table("users").select("id").limit(1).execute()
        checks.database = "healthy"
    except Exception as e:
        logger.warning(f"Database readiness check failed: {e}")
        checks.database = f"unhealthy: {str(e)[:50]}"

    checks.uploads = "healthy" if ctx.uploads.root.is_dir() else "unhealthy: missing upload path"

    all_healthy = checks.database == "healthy" and checks.uploads == "healthy"

    return ReadinessResponse(
        status="ready" if all_healthy else "degraded",
        checks=checks,
        timestamp=_now(),
    )


async def liveness_check() -> LivenessResponse:
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    """
    return LivenessResponse(status="alive", timestamp=_now())


ROUTES = [
    Route("GET", "/health", health_check, response_model=HealthResponse),
    Route("GET", "/health/ready", readiness_check, response_model=ReadinessResponse),
    Route("GET", "/health/live", liveness_check, response_model=LivenessResponse),
]

router = build_router(ROUTES, tags=["Health"])
