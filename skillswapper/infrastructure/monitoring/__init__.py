"""
Monitoring package.
"""

from .health_checks import HealthChecker, HealthStatus
from .metrics import get_metrics, get_metrics_content_type

__all__ = [
    "HealthChecker",
    "HealthStatus",
    "get_metrics",
    "get_metrics_content_type",
]
