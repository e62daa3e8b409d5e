"""
Health check implementations for the application.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from skillswapper.config.database import get_database_health
from skillswapper.config.logging import get_logger
from skillswapper.config.settings import settings

logger = get_logger(__name__)

CRITICAL_SERVICES = ("database",)


@dataclass
class HealthStatus:
    """Result of a round of health checks."""

    is_healthy: bool
    checks: Dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": "healthy" if self.is_healthy else "unhealthy",
            "timestamp": self.timestamp,
            "services": self.checks,
        }


class HealthChecker:
    """Health checker for application components."""

    def __init__(self, db_session: Optional[AsyncSession] = None):
        self.db_session = db_session
        self.checks: Dict[str, Callable[[], Awaitable[Dict[str, Any]]]] = {
            "database": self._check_database,
            "email": self._check_email,
        }

    async def run_health_checks(self) -> Dict[str, Any]:
        """Run all health checks."""
        results = {}

        for check_name, check_func in self.checks.items():
            try:
                results[check_name] = await check_func()
            except Exception as e:
                logger.error("Health check failed", check_name=check_name, error=str(e))
                results[check_name] = {"status": "error", "error": str(e)}

        return results

    async def _check_database(self) -> Dict[str, Any]:
        """Check database health."""
        if self.db_session is None:
            return {"status": "unhealthy", "error": "No database session"}
        return await get_database_health(self.db_session)

    async def _check_email(self) -> Dict[str, Any]:
        """Report the configured email provider. Delivery is best effort."""
        provider = settings.EMAIL_PROVIDER
        if provider == "smtp" and not settings.SMTP_HOST:
            return {"status": "unhealthy", "provider": provider, "error": "SMTP_HOST not set"}
        return {"status": "healthy", "provider": provider}

    async def check_readiness(self) -> HealthStatus:
        """Check if the service is ready to receive traffic."""
        results = await self.run_health_checks()
        critical_healthy = all(
            results.get(service, {}).get("status") == "healthy" for service in CRITICAL_SERVICES
        )
        return HealthStatus(is_healthy=critical_healthy, checks=results)

    async def check_all_components(self) -> HealthStatus:
        """Check all system components."""
        results = await self.run_health_checks()
        all_healthy = all(result.get("status") == "healthy" for result in results.values())
        return HealthStatus(is_healthy=all_healthy, checks=results)
