"""
Application use cases package.
"""

from .administer_users import AdministerUsersUseCase
from .authenticate_user import AuthenticateUserUseCase, AuthResult, RegisterRequest
from .connection_outcome import ConnectionFailure, ConnectionOutcome
from .find_matches import AnalyzeMatchUseCase, FindMatchesUseCase, MatchStatisticsUseCase
from .list_connections import ConnectionPage, ConnectionView, ListConnectionsUseCase
from .manage_notifications import ManageNotificationsUseCase, NotificationPage
from .manage_profile import ManageProfileUseCase
from .manage_skills import ManageSkillsUseCase
from .propose_connection import ProposeConnectionUseCase
from .respond_to_connection import RespondToConnectionUseCase

__all__ = [
    "AdministerUsersUseCase",
    "AuthenticateUserUseCase",
    "AuthResult",
    "RegisterRequest",
    "ConnectionFailure",
    "ConnectionOutcome",
    "AnalyzeMatchUseCase",
    "FindMatchesUseCase",
    "MatchStatisticsUseCase",
    "ConnectionPage",
    "ConnectionView",
    "ListConnectionsUseCase",
    "ManageNotificationsUseCase",
    "NotificationPage",
    "ManageProfileUseCase",
    "ManageSkillsUseCase",
    "ProposeConnectionUseCase",
    "RespondToConnectionUseCase",
]
