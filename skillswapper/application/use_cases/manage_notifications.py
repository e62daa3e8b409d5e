"""Notification inbox use case."""

from dataclasses import dataclass
from typing import Any, Dict, List

from skillswapper.application.interfaces.repositories import NotificationRepositoryInterface
from skillswapper.application.interfaces.services import TransactionServiceInterface
from skillswapper.config.logging import get_logger
from skillswapper.domain.entities.notification import Notification
from skillswapper.domain.exceptions.resource_error import NotFoundError

logger = get_logger(__name__)


@dataclass
class NotificationPage:
    notifications: List[Notification]
    unread_count: int
    total: int
    limit: int
    offset: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "notifications": [n.to_dict() for n in self.notifications],
            "unreadCount": self.unread_count,
            "pagination": {
                "total": self.total,
                "limit": self.limit,
                "offset": self.offset,
                "hasMore": self.offset + len(self.notifications) < self.total,
            },
        }


class ManageNotificationsUseCase:
    """Use case for reading and maintaining a user's notifications.

    Every operation is scoped to the recipient: ids belonging to other users
    behave exactly like ids that do not exist.
    """

    def __init__(
        self,
        notification_repo: NotificationRepositoryInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.notification_repo = notification_repo
        self.transaction_service = transaction_service

    async def list(
        self, user_id: int, limit: int = 20, offset: int = 0, unread_only: bool = False
    ) -> NotificationPage:
        notifications = await self.notification_repo.list_for_user(
            user_id, limit=limit, offset=offset, unread_only=unread_only
        )
        total = await self.notification_repo.count_for_user(user_id, unread_only=unread_only)
        unread = await self.notification_repo.count_for_user(user_id, unread_only=True)
        return NotificationPage(
            notifications=notifications,
            unread_count=unread,
            total=total,
            limit=limit,
            offset=offset,
        )

    async def unread_count(self, user_id: int) -> int:
        return await self.notification_repo.count_for_user(user_id, unread_only=True)

    async def mark_read(self, user_id: int, notification_id: int) -> None:
        updated = await self.transaction_service.execute_in_transaction(
            lambda: self.notification_repo.mark_read(notification_id, user_id)
        )
        if not updated:
            raise NotFoundError("Notification", notification_id)
        logger.debug("Notification marked as read", user_id=user_id, notification_id=notification_id)

    async def mark_all_read(self, user_id: int) -> int:
        count = await self.transaction_service.execute_in_transaction(
            lambda: self.notification_repo.mark_all_read(user_id)
        )
        logger.info("Notifications marked as read", user_id=user_id, count=count)
        return count

    async def delete(self, user_id: int, notification_id: int) -> None:
        deleted = await self.transaction_service.execute_in_transaction(
            lambda: self.notification_repo.delete(notification_id, user_id)
        )
        if not deleted:
            raise NotFoundError("Notification", notification_id)
        logger.info("Notification deleted", user_id=user_id, notification_id=notification_id)
