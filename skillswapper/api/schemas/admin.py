"""
Admin API schemas.
"""

from pydantic import BaseModel, ConfigDict, Field


class WarningSchema(BaseModel):
    """Warning sent by an admin to a user."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., min_length=1, max_length=1000)
    warning_type: str = Field("warning", alias="warningType", max_length=50)
