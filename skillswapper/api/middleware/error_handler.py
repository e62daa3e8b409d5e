"""
Error handling middleware.

Maps domain exceptions and framework errors onto the response envelope
``{success: false, message, error?}``.
"""

import traceback
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from skillswapper.config.logging import get_logger
from skillswapper.config.settings import settings
from skillswapper.domain.exceptions.auth_error import AuthenticationError, AuthorizationError
from skillswapper.domain.exceptions.resource_error import ConflictError, NotFoundError
from skillswapper.domain.exceptions.validation_error import ValidationError
from skillswapper.infrastructure.monitoring.metrics import record_error

logger = get_logger(__name__)


def error_body(message: str, detail: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    """Build the error envelope. ``detail`` is only exposed outside production."""
    body: Dict[str, Any] = {"success": False, "message": message}
    if detail and not settings.is_production:
        body["error"] = detail
    body.update(extra)
    return body


def _domain_handler(status_code: int, log_level: str, label: str):
    async def handler(request: Request, exc: Exception):
        getattr(logger, log_level)(label, error=str(exc), path=request.url.path)
        return JSONResponse(status_code=status_code, content=error_body(str(exc)))

    return handler


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    app.add_exception_handler(ValidationError, _domain_handler(400, "warning", "Validation error"))
    app.add_exception_handler(
        AuthenticationError, _domain_handler(401, "warning", "Authentication error")
    )
    app.add_exception_handler(
        AuthorizationError, _domain_handler(403, "warning", "Authorization error")
    )
    app.add_exception_handler(NotFoundError, _domain_handler(404, "info", "Resource not found"))
    app.add_exception_handler(ConflictError, _domain_handler(409, "info", "Resource conflict"))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
                "message": err.get("msg", ""),
            }
            for err in exc.errors()
        ]
        logger.warning("Request validation failed", path=request.url.path, errors=errors)
        return JSONResponse(
            status_code=400, content=error_body("Validation failed", errors=errors)
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error", error=str(exc), path=request.url.path)
        record_error("database_error", "api")
        return JSONResponse(
            status_code=500, content=error_body("A database error occurred", str(exc))
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        record_error(type(exc).__name__, "api")
        return JSONResponse(
            status_code=500, content=error_body("Internal server error", str(exc))
        )
