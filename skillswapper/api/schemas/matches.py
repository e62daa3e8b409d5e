"""
Match and connection API schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SaveMatchSchema(BaseModel):
    """Proposal payload. A missing target is reported as an invalid target."""

    user2Id: Optional[int] = None
    note: Optional[str] = Field(None, max_length=500)


class RespondToMatchSchema(BaseModel):
    """Accept/decline payload naming the original requester."""

    userId: Optional[int] = None
