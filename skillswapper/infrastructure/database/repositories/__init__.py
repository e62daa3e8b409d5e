"""
Database repositories package.
"""

from .connection_repository import ConnectionRepository
from .notification_repository import NotificationRepository
from .skill_repository import SkillRepository
from .transaction_repository import TransactionService
from .user_repository import UserRepository

__all__ = [
    "ConnectionRepository",
    "NotificationRepository",
    "SkillRepository",
    "TransactionService",
    "UserRepository",
]
