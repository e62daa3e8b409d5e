"""
Connection entity: a directional skill-swap proposal between two users.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple

from skillswapper.domain.exceptions.validation_error import ValidationError
from skillswapper.domain.value_objects.connection_status import ConnectionStatus
from skillswapper.domain.value_objects.matched_skills import MatchedSkills


def unordered_pair(a: int, b: int) -> Tuple[int, int]:
    """Key identifying a connection regardless of who initiated it."""
    return (a, b) if a <= b else (b, a)


@dataclass
class Connection:
    """Connection domain entity.

    ``user1_id`` is the initiator and ``user2_id`` the target. At most one
    connection exists per unordered pair of users.
    """

    user1_id: int
    user2_id: int
    matched_skills: MatchedSkills = field(default_factory=MatchedSkills)
    status: ConnectionStatus = ConnectionStatus.PENDING
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if self.user1_id == self.user2_id:
            raise ValidationError("A connection requires two different users")
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = self.created_at

    @property
    def pair(self) -> Tuple[int, int]:
        return unordered_pair(self.user1_id, self.user2_id)

    def involves(self, user_id: int) -> bool:
        return user_id in (self.user1_id, self.user2_id)

    def is_initiator(self, user_id: int) -> bool:
        return self.user1_id == user_id

    def other_party(self, user_id: int) -> int:
        if not self.involves(user_id):
            raise ValidationError(f"User {user_id} is not part of this connection")
        return self.user2_id if self.user1_id == user_id else self.user1_id

    def skills_for(self, user_id: int) -> MatchedSkills:
        """The snapshot seen from the given party's perspective."""
        if self.is_initiator(user_id):
            return self.matched_skills
        return self.matched_skills.reversed()
