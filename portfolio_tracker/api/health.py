"""Health check endpoints for monitoring application status.
"""
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter
from fastapi import HTTPException
from fastapi import status

from portfolio_tracker.core.deps import AppSettings
from portfolio_tracker.core.deps import StorageDep
from portfolio_tracker.core.docs import API_VERSION

router = APIRouter()


@router.get(
    "/health",
    response_model=dict[str, Any],
    summary="Health Check",
    description="Returns application readiness and storage backend status.",
    operation_id="get_health_status",
    responses={
        200: {"description": "Service is healthy"},
        503: {"description": "Service is unhealthy"},
    },
)
async def health_check(storage: StorageDep, settings: AppSettings) -> dict[str, Any]:
    """Health check endpoint.

    Returns:
        Dict[str, Any]: Health status information

    Raises:
        HTTPException: If the storage backend is unhealthy (status 503)
    """
    health_data = {
        "status": "healthy",
        "timestamp": datetime.now(UTC).isoformat(),
        "version": API_VERSION,
        "environment": settings.environment,
        "checks": {
            "application": {"status": "healthy", "message": "Application ready"},
        },
    }

    health_data["checks"]["storage"] = await storage.check_health()

    if health_data["checks"]["storage"]["status"] != "healthy":
        health_data["status"] = "unhealthy"
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=health_data)

    return health_data


@router.get(
    "/health/ready",
    response_model=dict[str, str],
    summary="Readiness Probe",
    description="Returns 200 OK when the application is ready to serve traffic.",
    operation_id="get_readiness",
)
async def readiness_check() -> dict[str, str]:
    """Simple readiness check for load balancer probes."""
    return {"status": "ready", "timestamp": datetime.now(UTC).isoformat()}


@router.get(
    "/health/live",
    response_model=dict[str, str],
    summary="Liveness Probe",
    description="Returns 200 OK when the application process is alive.",
    operation_id="get_liveness",
)
async def liveness_check() -> dict[str, str]:
    """Simple liveness check for container orchestration."""
    return {"status": "alive", "timestamp": datetime.now(UTC).isoformat()}
