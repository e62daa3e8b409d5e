"""
Notification type value object.
"""

from enum import Enum


class NotificationType(str, Enum):
    """Notification type enumeration."""

    CONNECTION_REQUEST = "connection_request"
    CONNECTION_ACCEPTED = "connection_accepted"
    CONNECTION_DECLINED = "connection_declined"
    MESSAGE = "message"
    SYSTEM = "system"

    def is_connection_event(self) -> bool:
        """Check if the notification was emitted by the connection workflow."""
        return self in [
            self.CONNECTION_REQUEST,
            self.CONNECTION_ACCEPTED,
            self.CONNECTION_DECLINED,
        ]
