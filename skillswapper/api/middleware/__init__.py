"""
API middleware package.
"""

from .error_handler import add_error_handlers, error_body
from .logging import LoggingMiddleware
from .rate_limiter import RateLimiterMiddleware

__all__ = [
    "add_error_handlers",
    "error_body",
    "LoggingMiddleware",
    "RateLimiterMiddleware",
]
