"""
Password hashing and validation using argon2id.
"""

import re
from typing import Optional

import argon2

from skillswapper.application.interfaces.services import PasswordHasherInterface
from skillswapper.domain.exceptions.validation_error import WeakPasswordError

_hasher = argon2.PasswordHasher(
    time_cost=2,
    memory_cost=65536,  # 64 MB
    parallelism=1,
    hash_len=32,
    salt_len=16,
    type=argon2.Type.ID,
)

SPECIAL_CHARACTERS = "@$!%*?&"


def hash_password(password: str) -> str:
    """Hash a password using argon2id. Returns the full hash string."""
    return _hasher.hash(password)


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    """
    Verify a password against its argon2id hash.

    Returns True if the password matches. Never raises on mismatch.
    """
    if not password_hash:
        return False
    try:
        return _hasher.verify(password_hash, password)
    except argon2.exceptions.VerifyMismatchError:
        return False
    except argon2.exceptions.InvalidHashError:
        return False


def validate_password_strength(password: str) -> None:
    """
    Validate password meets minimum strength requirements.

    Raises WeakPasswordError if the password is too weak.

    Requirements:
    - 8 to 128 characters
    - At least one lowercase letter, one uppercase letter and one digit
    - At least one special character from @$!%*?&
    """
    if not password or len(password) < 8 or len(password) > 128:
        raise WeakPasswordError("Password must be between 8 and 128 characters")
    if not (
        re.search(r"[a-z]", password)
        and re.search(r"[A-Z]", password)
        and re.search(r"\d", password)
        and any(c in SPECIAL_CHARACTERS for c in password)
    ):
        raise WeakPasswordError(
            "Password must contain at least one lowercase letter, one uppercase letter, "
            "one number, and one special character"
        )


class Argon2PasswordHasher(PasswordHasherInterface):
    """PasswordHasherInterface backed by argon2-cffi."""

    def hash(self, password: str) -> str:
        return hash_password(password)

    def verify(self, password: str, password_hash: Optional[str]) -> bool:
        return verify_password(password, password_hash)
