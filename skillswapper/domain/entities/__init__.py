"""
Domain entities package.
"""

from .connection import Connection, unordered_pair
from .notification import Notification, time_ago
from .user import HaveSkill, Skill, SkillProfile, User, WantSkill

__all__ = [
    "Connection",
    "unordered_pair",
    "Notification",
    "time_ago",
    "HaveSkill",
    "Skill",
    "SkillProfile",
    "User",
    "WantSkill",
]
