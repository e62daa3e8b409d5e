"""
Domain exceptions package.
"""

from .auth_error import AuthenticationError, AuthorizationError, InvalidCredentialsError
from .resource_error import ConflictError, EmailAlreadyRegisteredError, NotFoundError
from .validation_error import (
    InvalidLevelError,
    InvalidSkillError,
    RequiredFieldError,
    ValidationError,
    WeakPasswordError,
)

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "InvalidCredentialsError",
    "ConflictError",
    "EmailAlreadyRegisteredError",
    "NotFoundError",
    "InvalidLevelError",
    "InvalidSkillError",
    "RequiredFieldError",
    "ValidationError",
    "WeakPasswordError",
]
