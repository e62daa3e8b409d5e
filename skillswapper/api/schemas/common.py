"""
Common API schemas.
"""

from typing import Any, Optional

from pydantic import BaseModel


class ApiResponse(BaseModel):
    """Response envelope shared by every endpoint."""

    success: bool = True
    message: Optional[str] = None
    data: Optional[Any] = None


def ok(data: Any = None, message: Optional[str] = None) -> ApiResponse:
    return ApiResponse(success=True, message=message, data=data)


def clamp(value: int, low: int, high: int) -> int:
    """Clamp a pagination parameter into its allowed range."""
    return max(low, min(value, high))
