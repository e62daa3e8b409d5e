"""
User profile API schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .auth import NAME_PATTERN


class ProfileUpdateSchema(BaseModel):
    """Editable profile fields. Omitted fields are left unchanged."""

    name: Optional[str] = Field(None, min_length=2, max_length=100, pattern=NAME_PATTERN)
    bio: Optional[str] = Field(None, max_length=500)
    location: Optional[str] = Field(None, max_length=100)
    profile_pic: Optional[str] = Field(None, max_length=500)
