"""Health & Readiness Probes: liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the pool is not loaded or its file is not writable

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import deckpool.services.pool_service as pool_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "deckpool",
        "version": "1.0.0",
    }


@router.get("/ready")
def readiness_check():
    """Readiness probe: pool loaded and data file writable."""
    manager = pool_module.pool_manager
    if manager is None:
        reason = "pool_not_initialized"
    elif not manager.health_check():
        reason = "data_file_unwritable"
    else:
        return {"status": "ready", "checks": {"pool": "healthy"}}
    logger.warning(f"Readiness check failed: {reason}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
