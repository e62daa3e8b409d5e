"""
Connection status value object.
"""

from enum import Enum


class ConnectionStatus(str, Enum):
    """Connection lifecycle status enumeration."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    EXPIRED = "expired"

    def can_transition_to(self, target: "ConnectionStatus") -> bool:
        """Check if a transition to the target status is allowed."""
        return self == self.PENDING and target in [self.ACCEPTED, self.DECLINED]

    def is_final(self) -> bool:
        """Check if status is final (no more transitions)."""
        return self in [self.ACCEPTED, self.DECLINED, self.EXPIRED]
