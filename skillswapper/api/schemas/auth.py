"""
Authentication API schemas.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, EmailStr, Field, field_validator

from skillswapper.domain.exceptions.validation_error import WeakPasswordError
from skillswapper.infrastructure.security.passwords import validate_password_strength

NAME_PATTERN = r"^[A-Za-z\s]+$"

RawSkill = Union[str, Dict[str, Any]]


class RegisterRequestSchema(BaseModel):
    """Account registration payload."""

    name: str = Field(..., min_length=2, max_length=100, pattern=NAME_PATTERN)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    bio: Optional[str] = Field(None, max_length=500)
    location: Optional[str] = Field(None, max_length=100)
    skills_have: List[RawSkill] = Field(default_factory=list)
    skills_want: List[RawSkill] = Field(default_factory=list)

    @field_validator("name", "location", "bio")
    @classmethod
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if isinstance(v, str) else v

    @field_validator("password")
    @classmethod
    def check_strength(cls, v: str) -> str:
        try:
            validate_password_strength(v)
        except WeakPasswordError as e:
            raise ValueError(str(e))
        return v


class LoginRequestSchema(BaseModel):
    """Login payload."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class VerifyTokenRequestSchema(BaseModel):
    """Token verification payload."""

    token: str = Field(..., min_length=1)


class AdminLoginRequestSchema(BaseModel):
    """Admin login payload."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
