"""
API schemas package.
"""

from .admin import WarningSchema
from .auth import (
    AdminLoginRequestSchema,
    LoginRequestSchema,
    RegisterRequestSchema,
    VerifyTokenRequestSchema,
)
from .common import ApiResponse, clamp, ok
from .matches import RespondToMatchSchema, SaveMatchSchema
from .skills import AddSkillsSchema, UpdateProficiencySchema, UpdateUrgencySchema
from .users import ProfileUpdateSchema

__all__ = [
    "AddSkillsSchema",
    "AdminLoginRequestSchema",
    "ApiResponse",
    "clamp",
    "LoginRequestSchema",
    "ProfileUpdateSchema",
    "RegisterRequestSchema",
    "RespondToMatchSchema",
    "SaveMatchSchema",
    "UpdateProficiencySchema",
    "UpdateUrgencySchema",
    "VerifyTokenRequestSchema",
    "WarningSchema",
    "ok",
]
