"""
Health check endpoints for the application.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from skillswapper.config.database import get_db_session
from skillswapper.config.logging import get_logger
from skillswapper.config.settings import settings
from skillswapper.infrastructure.monitoring.health_checks import HealthChecker, HealthStatus
from skillswapper.infrastructure.monitoring.metrics import get_metrics, get_metrics_content_type

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


async def get_health_checker(db: AsyncSession = Depends(get_db_session)) -> HealthChecker:
    """Get health checker instance."""
    return HealthChecker(db)


@router.get("")
async def health_check(health_checker: HealthChecker = Depends(get_health_checker)):
    """Basic health check endpoint."""
    result = await health_checker.check_all_components()
    return {
        "success": result.is_healthy,
        "message": "SkillSwapper API is running",
        "environment": settings.ENVIRONMENT,
        **result.to_dict(),
    }


@router.get("/ready")
async def readiness_check(health_checker: HealthChecker = Depends(get_health_checker)):
    """Readiness check for Kubernetes."""
    result: HealthStatus = await health_checker.check_readiness()
    if not result.is_healthy:
        logger.warning("Service not ready", checks=result.checks)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Service not ready"
        )
    return {"status": "ready", "timestamp": result.timestamp}


@router.get("/live")
async def liveness_check():
    """Liveness check for Kubernetes."""
    return {"status": "alive", "timestamp": HealthStatus(is_healthy=True).timestamp}


@router.get("/metrics")
async def prometheus_metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.ENABLE_METRICS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Metrics disabled")

    logger.debug("Prometheus metrics requested")
    return Response(content=get_metrics(), media_type=get_metrics_content_type())
