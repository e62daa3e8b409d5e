"""
Notifications and emails emitted by the connection workflow.
"""

import asyncio
from typing import Optional, Tuple

from skillswapper.application.interfaces.repositories import NotificationRepositoryInterface
from skillswapper.application.interfaces.services import ConnectionMailerInterface
from skillswapper.config.logging import get_logger
from skillswapper.domain.entities.connection import Connection
from skillswapper.domain.entities.notification import Notification
from skillswapper.domain.entities.user import User
from skillswapper.domain.value_objects.matched_skills import MatchedSkills
from skillswapper.domain.value_objects.notification_type import NotificationType
from skillswapper.infrastructure.monitoring.metrics import record_email, record_notification

logger = get_logger(__name__)


class ConnectionNotifier:
    """Builds and dispatches connection notifications and acceptance emails."""

    def __init__(
        self,
        notification_repo: NotificationRepositoryInterface,
        mailer: Optional[ConnectionMailerInterface] = None,
    ):
        self.notification_repo = notification_repo
        self.mailer = mailer
        self.logger = logger

    async def notify_request(
        self, initiator: User, target_id: int, skills: MatchedSkills
    ) -> Notification:
        """Tell the target someone wants to connect."""
        return await self._create(
            Notification(
                user_id=target_id,
                from_user_id=initiator.id,
                type=NotificationType.CONNECTION_REQUEST,
                title="New Connection Request",
                message=f"{initiator.name} wants to connect for skill swapping!",
                data={
                    "fromUser": {
                        "id": initiator.id,
                        "name": initiator.name,
                        "profile_pic": initiator.profile_pic,
                    },
                    "matchData": skills.to_dict(),
                },
            )
        )

    async def notify_accepted(self, accepter: User, requester_id: int) -> Notification:
        return await self._create(
            Notification(
                user_id=requester_id,
                from_user_id=accepter.id,
                type=NotificationType.CONNECTION_ACCEPTED,
                title="Connection Accepted",
                message=f"{accepter.name} accepted your connection request.",
                data={"fromUser": {"id": accepter.id, "name": accepter.name}},
            )
        )

    async def notify_declined(self, decliner: User, requester_id: int) -> Notification:
        return await self._create(
            Notification(
                user_id=requester_id,
                from_user_id=decliner.id,
                type=NotificationType.CONNECTION_DECLINED,
                title="Connection Declined",
                message=f"{decliner.name} declined your connection request.",
                data={"fromUser": {"id": decliner.id, "name": decliner.name}},
            )
        )

    async def _create(self, notification: Notification) -> Notification:
        created = await self.notification_repo.create(notification)
        record_notification(notification.type.value)
        self.logger.info(
            "Notification created",
            notification_type=notification.type.value,
            recipient_id=notification.user_id,
            from_user_id=notification.from_user_id,
        )
        return created

    async def send_acceptance_emails(
        self, connection: Connection, requester: User, accepter: User
    ) -> Tuple[bool, bool]:
        """Email both parties about an accepted connection.

        Delivery is best effort: failures are logged and reported as False,
        never raised.
        """
        if self.mailer is None:
            return False, False

        results = await asyncio.gather(
            self.mailer.send_connection_accepted_to_requester(
                requester, accepter, connection.skills_for(requester.id)
            ),
            self.mailer.send_connection_accepted_to_accepter(
                accepter, requester, connection.skills_for(accepter.id)
            ),
            return_exceptions=True,
        )

        outcome = []
        for template, recipient, result in zip(
            ("connection_accepted_requester", "connection_accepted_accepter"),
            (requester, accepter),
            results,
        ):
            if isinstance(result, BaseException):
                self.logger.error(
                    "Acceptance email failed",
                    template=template,
                    recipient_id=recipient.id,
                    error=str(result),
                )
                record_email(template, "failed")
                outcome.append(False)
            else:
                record_email(template, "sent" if result else "failed")
                outcome.append(bool(result))

        self.logger.info(
            "Acceptance emails dispatched",
            connection_id=connection.id,
            requester_sent=outcome[0],
            accepter_sent=outcome[1],
        )
        return outcome[0], outcome[1]
