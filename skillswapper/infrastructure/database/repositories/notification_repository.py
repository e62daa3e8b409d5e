"""
Notification repository implementation.

Every read and write is scoped to the recipient, so a user can never see or
touch another user's notifications.
"""

from typing import List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from skillswapper.application.interfaces.repositories import NotificationRepositoryInterface
from skillswapper.config.logging import get_logger
from skillswapper.domain.entities.notification import Notification
from skillswapper.infrastructure.database.models import NotificationModel
from skillswapper.infrastructure.database.models.base import utcnow

from .mappers import notification_to_entity

logger = get_logger(__name__)


class NotificationRepository(NotificationRepositoryInterface):
    """Notification repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get(self, notification_id: int) -> Optional[NotificationModel]:
        stmt = (
            select(NotificationModel)
            .where(NotificationModel.id == notification_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, notification: Notification) -> Notification:
        """Create a new notification."""
        model = NotificationModel(
            user_id=notification.user_id,
            from_user_id=notification.from_user_id,
            type=notification.type.value,
            title=notification.title,
            message=notification.message,
            data=notification.data or None,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )

        self.db.add(model)
        await self.db.flush()

        model = await self._get(model.id)
        logger.info(
            "Notification created",
            notification_id=model.id,
            user_id=model.user_id,
            type=model.type,
        )
        return notification_to_entity(model)

    async def list_for_user(
        self, user_id: int, limit: int = 20, offset: int = 0, unread_only: bool = False
    ) -> List[Notification]:
        """Notifications for a recipient, newest first."""
        stmt = select(NotificationModel).where(NotificationModel.user_id == user_id)
        if unread_only:
            stmt = stmt.where(NotificationModel.is_read.is_(False))

        stmt = (
            stmt.order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.db.execute(stmt)
        return [notification_to_entity(model) for model in result.scalars().all()]

    async def count_for_user(self, user_id: int, unread_only: bool = False) -> int:
        """Count notifications for a recipient."""
        stmt = select(func.count(NotificationModel.id)).where(NotificationModel.user_id == user_id)
        if unread_only:
            stmt = stmt.where(NotificationModel.is_read.is_(False))
        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    async def mark_read(self, notification_id: int, user_id: int) -> bool:
        """Mark one of the recipient's notifications as read."""
        stmt = (
            update(NotificationModel)
            .where(NotificationModel.id == notification_id, NotificationModel.user_id == user_id)
            .values(is_read=True, read_at=func.coalesce(NotificationModel.read_at, utcnow()))
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        return result.rowcount > 0

    async def mark_all_read(self, user_id: int) -> int:
        """Mark all of the recipient's notifications as read."""
        stmt = (
            update(NotificationModel)
            .where(NotificationModel.user_id == user_id, NotificationModel.is_read.is_(False))
            .values(is_read=True, read_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)

        logger.info("Notifications marked read", user_id=user_id, count=result.rowcount)
        return result.rowcount

    async def delete(self, notification_id: int, user_id: int) -> bool:
        """Delete one of the recipient's notifications."""
        stmt = (
            delete(NotificationModel)
            .where(NotificationModel.id == notification_id, NotificationModel.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        return result.rowcount > 0
