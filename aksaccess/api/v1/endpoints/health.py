"""Health check endpoints for Kubernetes probes."""

from datetime import datetime, timezone
from typing import Dict, Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from aksaccess.api.dependencies import get_aks_support
from aksaccess.core.config import settings
from aksaccess.core.exceptions import ConfigMissingError
from aksaccess.core.logging import get_logger
from aksaccess.services.aks import AKSSupport

logger = get_logger(__name__)

router = APIRouter()

# Track application start time
APP_START_TIME = datetime.now(timezone.utc)


class HealthStatus(BaseModel):
    """Health check response model."""

    status: str = Field(..., description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    uptime_seconds: float = Field(..., description="Application uptime in seconds")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Application environment")


class ReadinessStatus(BaseModel):
    """Readiness check response model."""

    ready: bool = Field(..., description="Whether the application is ready")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    checks: Dict[str, bool] = Field(
        default_factory=dict, description="Individual readiness checks"
    )
    message: Optional[str] = Field(None, description="Additional status message")


@router.get(
    settings.health_check_path,
    response_model=HealthStatus,
    summary="Health Check",
    description="Kubernetes liveness probe endpoint",
)
async def health_check() -> HealthStatus:
    uptime = (datetime.now(timezone.utc) - APP_START_TIME).total_seconds()
    return HealthStatus(
        status="healthy",
        uptime_seconds=uptime,
        version=settings.app_version,
        environment=settings.environment.value,
    )


@router.get(
    settings.readiness_check_path,
    response_model=ReadinessStatus,
    responses={
        200: {"description": "Application is ready"},
        503: {"description": "Application is not ready"},
    },
    summary="Readiness Check",
    description="Kubernetes readiness probe endpoint",
)
async def readiness_check(
    response: Response, aks: AKSSupport = Depends(get_aks_support)
) -> ReadinessStatus:
    """
    Readiness check endpoint for Kubernetes readiness probe.

    Ready once both Azure target environment variables are set.
    """
    checks = {}
    missing = []

    for name, lookup in (
        ("subscription_id", aks.get_subscription_id),
        ("resource_group", aks.get_resource_group),
    ):
        try:
            lookup()
            checks[name] = True
        except ConfigMissingError as e:
            checks[name] = False
            missing.append(e.variable)

    is_ready = all(checks.values())

    if not is_ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        message = f"Missing environment variables: {', '.join(missing)}"
        logger.warning("Readiness check failed", extra={"checks": checks})
    else:
        message = "Application ready to receive traffic"

    return ReadinessStatus(ready=is_ready, checks=checks, message=message)
