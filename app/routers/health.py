# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter

from app.dependencies import ProductServiceDep, SettingsDep
from core.models.product import CamelModel

API_VERSION = "1.0.0"

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(CamelModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str
    product_count: int


class LivenessResponse(CamelModel):
    """Liveness check response."""
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(service: ProductServiceDep, app_settings: SettingsDep):
    """
    Health check endpoint.

    Returns basic health status and the number of products in memory.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=app_settings.ENVIRONMENT,
        version=API_VERSION,
        product_count=len(service.store),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    """
    return LivenessResponse(status="alive", timestamp=_now())
