"""
Domain package.
"""

from .entities import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "Connection",
    "Notification",
    "Skill",
    "SkillProfile",
    "User",
    "HaveSkill",
    "WantSkill",
    # Exceptions
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "NotFoundError",
    "ValidationError",
    # Value Objects
    "ConnectionStatus",
    "MatchedSkills",
    "NotificationType",
    "ProficiencyLevel",
    "SkillInput",
    "UrgencyLevel",
]
