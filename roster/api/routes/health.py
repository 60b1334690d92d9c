"""Health & Readiness Probes - liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the store is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from roster.api.dependencies import get_store
from roster.core.repository_protocols import IndividualStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "roster-api"}


@router.get("/ready")
async def readiness_check(store: IndividualStore = Depends(get_store)):
    """Readiness check, includes store connectivity."""
    if not await store.ping():
        logger.warning("Readiness check failed: store unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "store_unavailable"},
        )
    return {"status": "ready", "checks": {"store": "healthy"}}
