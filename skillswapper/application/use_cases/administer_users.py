"""Admin use cases: user management and platform statistics."""

import math
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from skillswapper.application.interfaces.repositories import (
    ConnectionRepositoryInterface,
    NotificationRepositoryInterface,
    SkillRepositoryInterface,
    UserRepositoryInterface,
)
from skillswapper.application.interfaces.services import TransactionServiceInterface
from skillswapper.config.logging import get_logger
from skillswapper.domain.entities.notification import Notification
from skillswapper.domain.exceptions.resource_error import NotFoundError
from skillswapper.domain.exceptions.validation_error import RequiredFieldError
from skillswapper.domain.value_objects.connection_status import ConnectionStatus
from skillswapper.domain.value_objects.notification_type import NotificationType

logger = get_logger(__name__)


class AdministerUsersUseCase:
    """Use case for admin-only user management."""

    def __init__(
        self,
        user_repo: UserRepositoryInterface,
        skill_repo: SkillRepositoryInterface,
        connection_repo: ConnectionRepositoryInterface,
        notification_repo: NotificationRepositoryInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.user_repo = user_repo
        self.skill_repo = skill_repo
        self.connection_repo = connection_repo
        self.notification_repo = notification_repo
        self.transaction_service = transaction_service

    async def list_users(
        self, search: Optional[str] = None, page: int = 1, limit: int = 20
    ) -> Dict[str, Any]:
        offset = (page - 1) * limit
        rows, total = await self.user_repo.list_users(search, limit=limit, offset=offset)
        return {
            "users": [
                {
                    "id": user.id,
                    "name": user.name,
                    "email": user.email,
                    "location": user.location,
                    "created_at": user.created_at,
                    "connectionCount": connection_count,
                }
                for user, connection_count in rows
            ],
            "pagination": {
                "total": total,
                "page": page,
                "limit": limit,
                "totalPages": math.ceil(total / limit) if limit else 0,
            },
        }

    async def user_detail(self, user_id: int) -> Dict[str, Any]:
        profile = await self.user_repo.get_profile(user_id)
        if profile is None:
            raise NotFoundError("User", user_id)

        rows, _ = await self.connection_repo.list_for_user(user_id, limit=100, offset=0)
        data = profile.to_dict(include_email=True)
        data["connections"] = [
            {
                "id": connection.id,
                "otherUser": {"id": other.id, "name": other.name, "email": other.email},
                "status": connection.status.value,
                "isInitiator": connection.is_initiator(user_id),
                "createdAt": connection.created_at,
            }
            for connection, other in rows
        ]
        return data

    async def delete_user(self, user_id: int) -> None:
        deleted = await self.transaction_service.execute_in_transaction(
            lambda: self.user_repo.delete(user_id)
        )
        if not deleted:
            raise NotFoundError("User", user_id)
        logger.info("User deleted by admin", user_id=user_id)

    async def send_warning(self, user_id: int, message: str, warning_type: str = "warning") -> None:
        if not message or not message.strip():
            raise RequiredFieldError("message")
        if await self.user_repo.get_by_id(user_id) is None:
            raise NotFoundError("User", user_id)

        await self.transaction_service.execute_in_transaction(
            lambda: self.notification_repo.create(
                Notification(
                    user_id=user_id,
                    type=NotificationType.SYSTEM,
                    title="Admin Warning",
                    message=message.strip(),
                    data={"warningType": warning_type, "fromAdmin": True},
                )
            )
        )
        logger.info("Admin warning sent", user_id=user_id, warning_type=warning_type)

    async def platform_stats(self) -> Dict[str, Any]:
        by_status = await self.connection_repo.count_by_status()
        week_ago = datetime.now(timezone.utc) - timedelta(days=7)
        return {
            "totalUsers": await self.user_repo.count(),
            "totalMatches": sum(by_status.values()),
            "acceptedMatches": by_status.get(ConnectionStatus.ACCEPTED.value, 0),
            "pendingMatches": by_status.get(ConnectionStatus.PENDING.value, 0),
            "recentUsers": await self.user_repo.count(created_since=week_ago),
            "topSkills": [
                {"skill_name": name, "count": count}
                for name, count in await self.skill_repo.top_offered(limit=10)
            ],
        }
