"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable (readiness)
    - Both answer with the standard {meta, data} envelope

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app.api.envelope import ok
from app.api.error_handlers import error_envelope
from app.infrastructure.database import get_db_manager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])

SERVICE_NAME = "clients-api"
SERVICE_VERSION = "1.0.0"


@router.get("")
async def health_check(request: Request):
    """Basic liveness probe. Returns 200 if the process is up."""
    response = ok(
        request,
        {"status": "healthy", "service": SERVICE_NAME, "version": SERVICE_VERSION},
        title="Healthy",
    )
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.to_content())


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe — includes database connectivity."""
    db_manager = get_db_manager(request)
    db_ok = await db_manager.health_check() if db_manager else False
    if not db_ok:
        return error_envelope(
            request, status.HTTP_503_SERVICE_UNAVAILABLE, "Database unavailable",
        )
    response = ok(
        request, {"status": "ready", "checks": {"database": "healthy"}}, title="Ready",
    )
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.to_content())
