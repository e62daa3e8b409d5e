"""
Rate limiting middleware.

In-memory sliding window per client address, with a stricter budget for the
authentication routes.
"""

import time
from typing import Callable, Dict, List, Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from skillswapper.config.logging import get_logger
from skillswapper.config.settings import Settings, settings
from skillswapper.infrastructure.monitoring.metrics import record_rate_limit_hit

logger = get_logger(__name__)


class RateLimiterMiddleware:
    """Rate limiting middleware for FastAPI."""

    def __init__(self, app: FastAPI, config: Optional[Settings] = None):
        self.app = app
        self.config = config or settings
        self.requests: Dict[str, List[float]] = {}
        self.window_seconds = self.config.RATE_LIMIT_WINDOW
        self._last_sweep = time.time()
        self.auth_prefix = f"{self.config.API_PREFIX}/auth"
        self.add_rate_limiter()

    def add_rate_limiter(self) -> None:
        """Add rate limiting middleware."""

        @self.app.middleware("http")
        async def rate_limit_middleware(request: Request, call_next: Callable) -> Response:
            client_ip = request.client.host if request.client else "unknown"
            scope = "auth" if request.url.path.startswith(self.auth_prefix) else "api"

            if not self._is_allowed(f"{scope}:{client_ip}", self._limit_for(scope)):
                logger.warning("Rate limit exceeded", client_ip=client_ip, scope=scope)
                record_rate_limit_hit(scope)
                message = (
                    "Too many authentication attempts, please try again later."
                    if scope == "auth"
                    else "Too many requests from this IP, please try again later."
                )
                return JSONResponse(
                    status_code=429,
                    content={"success": False, "message": message},
                    headers={"Retry-After": str(self.window_seconds)},
                )

            return await call_next(request)

    def _limit_for(self, scope: str) -> int:
        if scope == "auth":
            return self.config.AUTH_RATE_LIMIT_REQUESTS
        return self.config.RATE_LIMIT_REQUESTS

    def _is_allowed(self, key: str, max_requests: int) -> bool:
        """Check if client is within rate limit."""
        now = time.time()
        if now - self._last_sweep >= self.window_seconds:
            self._sweep(now)

        recent = [t for t in self.requests.get(key, []) if now - t < self.window_seconds]
        if len(recent) >= max_requests:
            self.requests[key] = recent
            return False

        recent.append(now)
        self.requests[key] = recent
        return True

    def _sweep(self, now: float) -> None:
        """Forget clients with no requests inside the current window."""
        stale = [
            key
            for key, stamps in self.requests.items()
            if not stamps or now - stamps[-1] >= self.window_seconds
        ]
        for key in stale:
            del self.requests[key]
        self._last_sweep = now
        if stale:
            logger.debug("Rate limiter swept idle clients", removed=len(stale))
