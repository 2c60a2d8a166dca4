"""
Health check endpoints for the UI service.

The engine has no external dependencies; readiness checks that the static
tables the composer relies on are complete.
"""
import time
from typing import Dict, Optional

from fastapi import APIRouter, Response, status
from pydantic import BaseModel, ConfigDict

from sdui_service.config import settings
from sdui_service.models.schemas.core import Context, Mode
from sdui_service.services.catalog import product_catalog
from sdui_service.services.composer import HOME_ROUTINES
from sdui_service.services.pipeline import default_pipeline
from sdui_service.services.theme_palette import PALETTES
from sdui_service.utils.datetime_utils import local_now, to_iso_string, utc_now
from sdui_service.utils.logging import get_logger, log_context

router = APIRouter()
logger = get_logger(__name__)

SERVICE_START_TIME = time.time()


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class HealthResponse(BaseModel):
    """Basic health response, including the mode currently being served"""
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "status": "healthy",
            "timestamp": "2025-01-01T12:00:00Z",
            "mode": "flash_sale"
        }
    })

    status: str
    timestamp: str
    mode: Mode


class LivenessResponse(BaseModel):
    """Liveness probe response"""
    status: str
    timestamp: str


class DependencyStatus(BaseModel):
    """Status of a single readiness check"""
    name: str
    status: str  # "healthy", "unhealthy"
    message: Optional[str] = None
    last_checked: str


class ReadinessResponse(BaseModel):
    """Readiness probe response"""
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "status": "ready",
            "ready": True,
            "version": "2.0.0",
            "uptime_seconds": 12.5,
            "dependencies": {
                "theme_palette": {
                    "name": "Theme Palette",
                    "status": "healthy",
                    "message": "7/7 modes covered",
                    "last_checked": "2025-01-01T12:00:00Z"
                }
            },
            "timestamp": "2025-01-01T12:00:00Z"
        }
    })

    status: str  # "ready", "not_ready"
    ready: bool
    version: str
    uptime_seconds: float
    dependencies: Dict[str, DependencyStatus]
    timestamp: str


# ============================================================================
# CHECKS
# ============================================================================

def _coverage_status(name: str, covered: int) -> DependencyStatus:
    total = len(Mode)
    return DependencyStatus(
        name=name,
        status="healthy" if covered == total else "unhealthy",
        message=f"{covered}/{total} modes covered",
        last_checked=to_iso_string(utc_now()),
    )


def check_palette() -> DependencyStatus:
    return _coverage_status("Theme Palette", sum(1 for mode in Mode if mode in PALETTES))


def check_home_routines() -> DependencyStatus:
    return _coverage_status("Home Routines", sum(1 for mode in Mode if mode in HOME_ROUTINES))


def check_catalog() -> DependencyStatus:
    loaded = product_catalog.is_loaded
    return DependencyStatus(
        name="Product Catalog",
        status="healthy" if loaded else "unhealthy",
        message=f"{len(product_catalog)} products" if loaded else "Catalog is empty",
        last_checked=to_iso_string(utc_now()),
    )


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Basic health check",
)
def health_check() -> HealthResponse:
    now = local_now()
    return HealthResponse(
        status="healthy",
        timestamp=to_iso_string(now),
        mode=default_pipeline.mode_for(Context(now=now)),
    )


@router.get(
    "/health/live",
    response_model=LivenessResponse,
    tags=["Health"],
    summary="Liveness probe",
)
async def liveness_check() -> LivenessResponse:
    # no checks, no logging
    return LivenessResponse(status="alive", timestamp=to_iso_string(utc_now()))


@router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    tags=["Health"],
    summary="Readiness probe",
    description="Checks that every mode has a palette and a home arrangement and that the catalog is loaded.",
)
async def readiness_check(response: Response) -> ReadinessResponse:
    with log_context(endpoint="/health/ready"):
        dependencies = {
            "theme_palette": check_palette(),
            "home_routines": check_home_routines(),
            "product_catalog": check_catalog(),
        }

        ready = all(dep.status == "healthy" for dep in dependencies.values())

        if ready:
            logger.info(
                "health.readiness.passed",
                extra={"dependencies": {k: v.status for k, v in dependencies.items()}}
            )
        else:
            logger.warning(
                "health.readiness.failed",
                extra={
                    "unhealthy": [k for k, v in dependencies.items() if v.status != "healthy"]
                }
            )
            response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

        return ReadinessResponse(
            status="ready" if ready else "not_ready",
            ready=ready,
            version=settings.app_version,
            uptime_seconds=round(time.time() - SERVICE_START_TIME, 3),
            dependencies=dependencies,
            timestamp=to_iso_string(utc_now()),
        )
