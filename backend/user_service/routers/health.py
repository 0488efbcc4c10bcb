"""
Health check router for liveness and readiness probes.
"""
import logging

from fastapi import APIRouter, Request, status

from user_service.services.account_store import AccountStoreError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check(request: Request):
    """
    Readiness check that verifies the MongoDB connection.
    """
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
    }

    store = getattr(request.app.state, "account_store", None)
    if store is None:
        checks["mongodb"] = "unhealthy"
    else:
        try:
            await store.ping()
            checks["mongodb"] = "healthy"
        except AccountStoreError as e:
            logger.error(f"Readiness ping failed: {e}")
            checks["mongodb"] = "unhealthy"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
