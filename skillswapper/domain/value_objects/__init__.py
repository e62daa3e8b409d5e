"""
Domain value objects package.
"""

from .connection_status import ConnectionStatus
from .matched_skills import MatchedSkills, SkillSnapshot
from .notification_type import NotificationType
from .skill_input import SkillInput, normalize_skill_name
from .skill_level import ProficiencyLevel, UrgencyLevel

__all__ = [
    "ConnectionStatus",
    "MatchedSkills",
    "SkillSnapshot",
    "NotificationType",
    "SkillInput",
    "normalize_skill_name",
    "ProficiencyLevel",
    "UrgencyLevel",
]
