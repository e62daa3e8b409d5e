"""
Unit tests for ConnectionNotifier.
"""

from unittest.mock import AsyncMock

import pytest

from skillswapper.application.services.connection_notifier import ConnectionNotifier
from skillswapper.domain.entities.connection import Connection
from skillswapper.domain.entities.user import User
from skillswapper.domain.value_objects.matched_skills import MatchedSkills, SkillSnapshot
from skillswapper.domain.value_objects.notification_type import NotificationType


class TestConnectionNotifier:
    """Test cases for ConnectionNotifier."""

    @pytest.fixture
    def requester(self):
        return User(id=1, name="Alice", email="alice@example.com", location="Austin")

    @pytest.fixture
    def accepter(self):
        return User(id=2, name="Bob", email="bob@example.com")

    @pytest.fixture
    def connection(self):
        return Connection(
            id=10,
            user1_id=1,
            user2_id=2,
            matched_skills=MatchedSkills(
                skills_you_can_teach_them=(SkillSnapshot("Python", "expert"),),
                skills_they_can_teach_you=(SkillSnapshot("Guitar", "advanced"),),
            ),
        )

    @pytest.mark.asyncio
    async def test_notify_request(self, mock_notification_repository, requester, connection):
        notifier = ConnectionNotifier(mock_notification_repository)

        # Act
        notification = await notifier.notify_request(requester, 2, connection.matched_skills)

        # Assert
        assert notification.user_id == 2
        assert notification.from_user_id == 1
        assert notification.type == NotificationType.CONNECTION_REQUEST
        assert notification.title == "New Connection Request"
        assert notification.message == "Alice wants to connect for skill swapping!"
        assert notification.data["fromUser"]["id"] == 1
        assert notification.data["matchData"]["matchScore"] == 2
        mock_notification_repository.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_notify_accepted_and_declined(self, mock_notification_repository, accepter):
        notifier = ConnectionNotifier(mock_notification_repository)

        # Act
        accepted = await notifier.notify_accepted(accepter, 1)
        declined = await notifier.notify_declined(accepter, 1)

        # Assert
        assert accepted.type == NotificationType.CONNECTION_ACCEPTED
        assert accepted.user_id == 1
        assert accepted.message == "Bob accepted your connection request."
        assert declined.type == NotificationType.CONNECTION_DECLINED
        assert declined.message == "Bob declined your connection request."

    @pytest.mark.asyncio
    async def test_acceptance_emails_use_each_perspective(
        self, mock_notification_repository, mock_mailer, requester, accepter, connection
    ):
        notifier = ConnectionNotifier(mock_notification_repository, mock_mailer)

        # Act
        sent = await notifier.send_acceptance_emails(connection, requester, accepter)

        # Assert
        assert sent == (True, True)
        mock_mailer.send_connection_accepted_to_requester.assert_awaited_once_with(
            requester, accepter, connection.matched_skills
        )
        mock_mailer.send_connection_accepted_to_accepter.assert_awaited_once_with(
            accepter, requester, connection.matched_skills.reversed()
        )

    @pytest.mark.asyncio
    async def test_email_failure_is_reported_not_raised(
        self, mock_notification_repository, mock_mailer, requester, accepter, connection
    ):
        mock_mailer.send_connection_accepted_to_requester = AsyncMock(
            side_effect=ConnectionError("SMTP down")
        )
        mock_mailer.send_connection_accepted_to_accepter = AsyncMock(return_value=False)
        notifier = ConnectionNotifier(mock_notification_repository, mock_mailer)

        # Act
        sent = await notifier.send_acceptance_emails(connection, requester, accepter)

        # Assert
        assert sent == (False, False)

    @pytest.mark.asyncio
    async def test_no_mailer_sends_nothing(
        self, mock_notification_repository, requester, accepter, connection
    ):
        notifier = ConnectionNotifier(mock_notification_repository)

        sent = await notifier.send_acceptance_emails(connection, requester, accepter)

        assert sent == (False, False)
