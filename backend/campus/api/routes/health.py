"""Health & Readiness - liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up (liveness)
    - GET /api/v1/health/ready returns 503 until the registrar is attached (readiness)
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "campus-records-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness check - reports record counts from the in-memory store."""
    registrar = getattr(request.app.state, "registrar", None)
    if registrar is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "registrar_unavailable"},
        )
    return {"status": "ready", "checks": {"store": "healthy"}, "counts": registrar.counts()}
