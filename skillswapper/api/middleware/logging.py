"""
Request logging middleware.

Binds a request id into the structlog context so every event logged while
handling the request carries it, and records API metrics per route.
"""

import time
import uuid
from typing import Callable

import structlog
from fastapi import FastAPI, Request, Response

from skillswapper.config.logging import get_logger
from skillswapper.infrastructure.monitoring.metrics import record_api_request

logger = get_logger(__name__)

QUIET_PREFIXES = ("/api/health",)


def _endpoint_label(request: Request) -> str:
    # Route templates keep metric label cardinality bounded
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class LoggingMiddleware:
    """Logs one start and one finish event per request."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_logging_middleware()

    def add_logging_middleware(self) -> None:
        @self.app.middleware("http")
        async def logging_middleware(request: Request, call_next: Callable) -> Response:
            request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
            structlog.contextvars.clear_contextvars()
            structlog.contextvars.bind_contextvars(
                request_id=request_id, method=request.method, path=request.url.path
            )
            request.state.request_id = request_id
            log = logger.debug if request.url.path.startswith(QUIET_PREFIXES) else logger.info

            log("Request received", client=request.client.host if request.client else None)
            started = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception as e:
                elapsed = time.perf_counter() - started
                logger.error("Request crashed", error=str(e), duration_ms=round(elapsed * 1000, 1))
                record_api_request(request.method, _endpoint_label(request), 500, elapsed)
                raise

            elapsed = time.perf_counter() - started
            log("Request finished", status_code=response.status_code, duration_ms=round(elapsed * 1000, 1))
            record_api_request(request.method, _endpoint_label(request), response.status_code, elapsed)

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{elapsed:.4f}"
            return response
