"""
Security package: password hashing and access tokens.
"""

from .passwords import (
    Argon2PasswordHasher,
    hash_password,
    validate_password_strength,
    verify_password,
)
from .tokens import JWTTokenService

__all__ = [
    "Argon2PasswordHasher",
    "hash_password",
    "validate_password_strength",
    "verify_password",
    "JWTTokenService",
]
