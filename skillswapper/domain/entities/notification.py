"""
Notification entity.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from skillswapper.domain.value_objects.notification_type import NotificationType


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; they are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def time_ago(created_at: datetime, now: Optional[datetime] = None) -> str:
    """Human readable age of a timestamp ("Just now", "5 minutes ago", ...)."""
    now = _as_utc(now or datetime.now(timezone.utc))
    seconds = int((now - _as_utc(created_at)).total_seconds())

    if seconds < 60:
        return "Just now"
    if seconds < 3600:
        minutes = seconds // 60
        return f"{minutes} minute{'s' if minutes > 1 else ''} ago"
    if seconds < 86400:
        hours = seconds // 3600
        return f"{hours} hour{'s' if hours > 1 else ''} ago"
    if seconds < 30 * 86400:
        days = seconds // 86400
        return f"{days} day{'s' if days > 1 else ''} ago"
    return created_at.date().isoformat()


@dataclass
class Notification:
    """Notification domain entity."""

    user_id: int
    type: NotificationType
    title: str
    message: str
    from_user_id: Optional[int] = None
    data: Dict[str, Any] = field(default_factory=dict)
    is_read: bool = False
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    read_at: Optional[datetime] = None
    from_user_name: Optional[str] = None
    from_user_pic: Optional[str] = None

    def __post_init__(self):
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)

    def mark_read(self) -> None:
        if not self.is_read:
            self.is_read = True
            self.read_at = datetime.now(timezone.utc)

    @property
    def time_ago(self) -> str:
        return time_ago(self.created_at)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "from_user_id": self.from_user_id,
            "type": self.type.value,
            "title": self.title,
            "message": self.message,
            "data": self.data or None,
            "is_read": self.is_read,
            "created_at": self.created_at,
            "read_at": self.read_at,
            "from_user_name": self.from_user_name,
            "from_user_pic": self.from_user_pic,
            "timeAgo": self.time_ago,
        }
