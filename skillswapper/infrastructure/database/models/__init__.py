"""
Database models package.
"""

from .base import Base, BaseModel
from .connection import ConnectionModel
from .notification import NotificationModel
from .skill import SkillModel, UserSkillHaveModel, UserSkillWantModel
from .user import UserModel

__all__ = [
    "Base",
    "BaseModel",
    "ConnectionModel",
    "NotificationModel",
    "SkillModel",
    "UserModel",
    "UserSkillHaveModel",
    "UserSkillWantModel",
]
