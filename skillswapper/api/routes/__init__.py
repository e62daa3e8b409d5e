"""
API routes package.
"""

from . import admin, auth, health, matches, notifications, skills, users

__all__ = ["admin", "auth", "health", "matches", "notifications", "skills", "users"]
