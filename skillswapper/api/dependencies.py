"""
FastAPI dependency injection container.
"""

from typing import Annotated, Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from skillswapper.application.services.connection_notifier import ConnectionNotifier
from skillswapper.application.services.skill_matcher import SkillMatcher
from skillswapper.application.use_cases.administer_users import AdministerUsersUseCase
from skillswapper.application.use_cases.authenticate_user import (
    ADMIN_ROLE,
    AuthenticateUserUseCase,
)
from skillswapper.application.use_cases.find_matches import (
    AnalyzeMatchUseCase,
    FindMatchesUseCase,
    MatchStatisticsUseCase,
)
from skillswapper.application.use_cases.list_connections import ListConnectionsUseCase
from skillswapper.application.use_cases.manage_notifications import ManageNotificationsUseCase
from skillswapper.application.use_cases.manage_profile import ManageProfileUseCase
from skillswapper.application.use_cases.manage_skills import ManageSkillsUseCase
from skillswapper.application.use_cases.propose_connection import ProposeConnectionUseCase
from skillswapper.application.use_cases.respond_to_connection import RespondToConnectionUseCase
from skillswapper.config.database import get_db_session
from skillswapper.config.logging import get_logger
from skillswapper.domain.exceptions.auth_error import AuthenticationError, AuthorizationError
from skillswapper.infrastructure.database.repositories import (
    ConnectionRepository,
    NotificationRepository,
    SkillRepository,
    TransactionService,
    UserRepository,
)
from skillswapper.infrastructure.email.service import EmailService, get_email_service
from skillswapper.infrastructure.security.passwords import Argon2PasswordHasher
from skillswapper.infrastructure.security.tokens import JWTTokenService

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


# Database Dependencies
async def get_user_repository(db: AsyncSession = Depends(get_db_session)) -> UserRepository:
    """Get user repository instance."""
    return UserRepository(db)


async def get_skill_repository(db: AsyncSession = Depends(get_db_session)) -> SkillRepository:
    """Get skill repository instance."""
    return SkillRepository(db)


async def get_connection_repository(
    db: AsyncSession = Depends(get_db_session),
) -> ConnectionRepository:
    """Get connection repository instance."""
    return ConnectionRepository(db)


async def get_notification_repository(
    db: AsyncSession = Depends(get_db_session),
) -> NotificationRepository:
    """Get notification repository instance."""
    return NotificationRepository(db)


async def get_transaction_service(
    db: AsyncSession = Depends(get_db_session),
) -> TransactionService:
    """Get transaction service instance."""
    return TransactionService(db)


UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
SkillRepositoryDep = Annotated[SkillRepository, Depends(get_skill_repository)]
ConnectionRepositoryDep = Annotated[ConnectionRepository, Depends(get_connection_repository)]
NotificationRepositoryDep = Annotated[
    NotificationRepository, Depends(get_notification_repository)
]
TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]


# Service Dependencies
async def get_skill_matcher() -> SkillMatcher:
    """Get skill matcher instance."""
    return SkillMatcher()


async def get_token_service() -> JWTTokenService:
    return JWTTokenService()


async def get_password_hasher() -> Argon2PasswordHasher:
    return Argon2PasswordHasher()


async def get_mailer() -> EmailService:
    return get_email_service()


async def get_connection_notifier(
    notification_repo: NotificationRepositoryDep,
    mailer: EmailService = Depends(get_mailer),
) -> ConnectionNotifier:
    """Get connection notifier instance."""
    return ConnectionNotifier(notification_repo, mailer)


SkillMatcherDep = Annotated[SkillMatcher, Depends(get_skill_matcher)]
TokenServiceDep = Annotated[JWTTokenService, Depends(get_token_service)]
PasswordHasherDep = Annotated[Argon2PasswordHasher, Depends(get_password_hasher)]
ConnectionNotifierDep = Annotated[ConnectionNotifier, Depends(get_connection_notifier)]


# Authentication
async def get_token_claims(
    tokens: TokenServiceDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Dict[str, Any]:
    """Decode the bearer token of the request."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access token required")
    return tokens.decode(credentials.credentials)


async def get_current_user_id(claims: Dict[str, Any] = Depends(get_token_claims)) -> int:
    """Id of the authenticated user."""
    return AuthenticateUserUseCase.user_id_from_claims(claims)


async def require_admin(claims: Dict[str, Any] = Depends(get_token_claims)) -> Dict[str, Any]:
    """Claims of an authenticated admin."""
    if claims.get("role") != ADMIN_ROLE:
        logger.warning("Admin route accessed without admin role", subject=claims.get("sub"))
        raise AuthorizationError("Admin access required")
    return claims


CurrentUserIdDep = Annotated[int, Depends(get_current_user_id)]
AdminDep = Annotated[Dict[str, Any], Depends(require_admin)]


# Use Case Dependencies
async def get_authenticate_user_use_case(
    user_repo: UserRepositoryDep,
    skill_repo: SkillRepositoryDep,
    hasher: PasswordHasherDep,
    tokens: TokenServiceDep,
    transaction_service: TransactionServiceDep,
) -> AuthenticateUserUseCase:
    return AuthenticateUserUseCase(user_repo, skill_repo, hasher, tokens, transaction_service)


async def get_manage_profile_use_case(
    user_repo: UserRepositoryDep, transaction_service: TransactionServiceDep
) -> ManageProfileUseCase:
    return ManageProfileUseCase(user_repo, transaction_service)


async def get_manage_skills_use_case(
    skill_repo: SkillRepositoryDep,
    user_repo: UserRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> ManageSkillsUseCase:
    return ManageSkillsUseCase(skill_repo, user_repo, transaction_service)


async def get_find_matches_use_case(
    user_repo: UserRepositoryDep, matcher: SkillMatcherDep
) -> FindMatchesUseCase:
    return FindMatchesUseCase(user_repo, matcher)


async def get_analyze_match_use_case(
    user_repo: UserRepositoryDep, matcher: SkillMatcherDep
) -> AnalyzeMatchUseCase:
    return AnalyzeMatchUseCase(user_repo, matcher)


async def get_match_statistics_use_case(
    user_repo: UserRepositoryDep,
    connection_repo: ConnectionRepositoryDep,
    matcher: SkillMatcherDep,
) -> MatchStatisticsUseCase:
    return MatchStatisticsUseCase(user_repo, connection_repo, matcher)


async def get_propose_connection_use_case(
    user_repo: UserRepositoryDep,
    connection_repo: ConnectionRepositoryDep,
    matcher: SkillMatcherDep,
    notifier: ConnectionNotifierDep,
    transaction_service: TransactionServiceDep,
) -> ProposeConnectionUseCase:
    return ProposeConnectionUseCase(
        user_repo, connection_repo, matcher, notifier, transaction_service
    )


async def get_respond_to_connection_use_case(
    user_repo: UserRepositoryDep,
    connection_repo: ConnectionRepositoryDep,
    notifier: ConnectionNotifierDep,
    transaction_service: TransactionServiceDep,
) -> RespondToConnectionUseCase:
    return RespondToConnectionUseCase(user_repo, connection_repo, notifier, transaction_service)


async def get_list_connections_use_case(
    connection_repo: ConnectionRepositoryDep,
) -> ListConnectionsUseCase:
    return ListConnectionsUseCase(connection_repo)


async def get_manage_notifications_use_case(
    notification_repo: NotificationRepositoryDep, transaction_service: TransactionServiceDep
) -> ManageNotificationsUseCase:
    return ManageNotificationsUseCase(notification_repo, transaction_service)


async def get_administer_users_use_case(
    user_repo: UserRepositoryDep,
    skill_repo: SkillRepositoryDep,
    connection_repo: ConnectionRepositoryDep,
    notification_repo: NotificationRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> AdministerUsersUseCase:
    return AdministerUsersUseCase(
        user_repo, skill_repo, connection_repo, notification_repo, transaction_service
    )


AuthenticateUserDep = Annotated[AuthenticateUserUseCase, Depends(get_authenticate_user_use_case)]
ManageProfileDep = Annotated[ManageProfileUseCase, Depends(get_manage_profile_use_case)]
ManageSkillsDep = Annotated[ManageSkillsUseCase, Depends(get_manage_skills_use_case)]
FindMatchesDep = Annotated[FindMatchesUseCase, Depends(get_find_matches_use_case)]
AnalyzeMatchDep = Annotated[AnalyzeMatchUseCase, Depends(get_analyze_match_use_case)]
MatchStatisticsDep = Annotated[MatchStatisticsUseCase, Depends(get_match_statistics_use_case)]
ProposeConnectionDep = Annotated[
    ProposeConnectionUseCase, Depends(get_propose_connection_use_case)
]
RespondToConnectionDep = Annotated[
    RespondToConnectionUseCase, Depends(get_respond_to_connection_use_case)
]
ListConnectionsDep = Annotated[ListConnectionsUseCase, Depends(get_list_connections_use_case)]
ManageNotificationsDep = Annotated[
    ManageNotificationsUseCase, Depends(get_manage_notifications_use_case)
]
AdministerUsersDep = Annotated[AdministerUsersUseCase, Depends(get_administer_users_use_case)]
