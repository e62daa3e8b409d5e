"""
Application interfaces package.
"""

from .repositories import (
    ConnectionRepositoryInterface,
    NotificationRepositoryInterface,
    SkillRepositoryInterface,
    UserRepositoryInterface,
)
from .services import (
    ConnectionMailerInterface,
    PasswordHasherInterface,
    TokenServiceInterface,
    TransactionServiceInterface,
)

__all__ = [
    "ConnectionRepositoryInterface",
    "NotificationRepositoryInterface",
    "SkillRepositoryInterface",
    "UserRepositoryInterface",
    "ConnectionMailerInterface",
    "PasswordHasherInterface",
    "TokenServiceInterface",
    "TransactionServiceInterface",
]
