"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from skillswapper.domain.entities.connection import Connection
from skillswapper.domain.entities.notification import Notification
from skillswapper.domain.entities.user import Skill, SkillProfile, User
from skillswapper.domain.value_objects.connection_status import ConnectionStatus
from skillswapper.domain.value_objects.skill_level import ProficiencyLevel, UrgencyLevel


class UserRepositoryInterface(ABC):
    """User repository interface."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user."""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)."""
        pass

    @abstractmethod
    async def get_profile(self, user_id: int) -> Optional[SkillProfile]:
        """Get a user together with their have and want skills."""
        pass

    @abstractmethod
    async def update_profile(self, user_id: int, changes: Dict[str, Any]) -> Optional[User]:
        """Update editable profile fields."""
        pass

    @abstractmethod
    async def find_reciprocal_profiles(self, user_id: int) -> List[SkillProfile]:
        """Profiles of users sharing at least one skill in each direction."""
        pass

    @abstractmethod
    async def list_users(
        self, search: Optional[str], limit: int, offset: int
    ) -> Tuple[List[Tuple[User, int]], int]:
        """List users with their connection counts, and the total count."""
        pass

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        """Delete a user and everything they own."""
        pass

    @abstractmethod
    async def count(self, created_since: Optional[datetime] = None) -> int:
        """Count users, optionally only those created since a timestamp."""
        pass


class SkillRepositoryInterface(ABC):
    """Skill catalog and user skill repository interface."""

    @abstractmethod
    async def list_skills(
        self, search: Optional[str] = None, popular: bool = False, limit: int = 100
    ) -> List[Skill]:
        """List catalog skills."""
        pass

    @abstractmethod
    async def get_by_id(self, skill_id: int) -> Optional[Skill]:
        """Get skill by ID."""
        pass

    @abstractmethod
    async def find_or_create(self, name: str) -> Skill:
        """Find a skill by name (case-insensitive) or create it."""
        pass

    @abstractmethod
    async def add_have(self, user_id: int, skill_id: int, level: ProficiencyLevel) -> None:
        """Add or update a skill the user can teach."""
        pass

    @abstractmethod
    async def add_want(self, user_id: int, skill_id: int, urgency: UrgencyLevel) -> None:
        """Add or update a skill the user wants to learn."""
        pass

    @abstractmethod
    async def remove_have(self, user_id: int, skill_id: int) -> bool:
        """Remove a have-skill. Returns False when the user did not list it."""
        pass

    @abstractmethod
    async def remove_want(self, user_id: int, skill_id: int) -> bool:
        """Remove a want-skill. Returns False when the user did not list it."""
        pass

    @abstractmethod
    async def update_have_level(
        self, user_id: int, skill_id: int, level: ProficiencyLevel
    ) -> bool:
        """Change the proficiency of an existing have-skill."""
        pass

    @abstractmethod
    async def update_want_urgency(
        self, user_id: int, skill_id: int, urgency: UrgencyLevel
    ) -> bool:
        """Change the urgency of an existing want-skill."""
        pass

    @abstractmethod
    async def top_offered(self, limit: int = 10) -> List[Tuple[str, int]]:
        """Most frequently offered skills with their user counts."""
        pass


class ConnectionRepositoryInterface(ABC):
    """Connection repository interface."""

    @abstractmethod
    async def get_between(self, user_a: int, user_b: int) -> Optional[Connection]:
        """Get the connection for an unordered pair of users."""
        pass

    @abstractmethod
    async def upsert_proposal(self, connection: Connection) -> Connection:
        """Insert a pending proposal, or refresh the snapshot of the existing one.

        The status of an existing connection is never changed here.
        """
        pass

    @abstractmethod
    async def transition_pending(
        self, user_a: int, user_b: int, status: ConnectionStatus
    ) -> Optional[Connection]:
        """Move a pending connection of the pair to ``status``.

        Returns None when no pending connection exists for the pair.
        """
        pass

    @abstractmethod
    async def list_for_user(
        self,
        user_id: int,
        status: Optional[ConnectionStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[List[Tuple[Connection, User]], int]:
        """Connections involving a user with the other party, and the total."""
        pass

    @abstractmethod
    async def count_by_status(self, user_id: Optional[int] = None) -> Dict[str, int]:
        """Connection counts per status, for one user or platform-wide."""
        pass


class NotificationRepositoryInterface(ABC):
    """Notification repository interface."""

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        """Create a new notification."""
        pass

    @abstractmethod
    async def list_for_user(
        self, user_id: int, limit: int = 20, offset: int = 0, unread_only: bool = False
    ) -> List[Notification]:
        """Notifications for a recipient, newest first."""
        pass

    @abstractmethod
    async def count_for_user(self, user_id: int, unread_only: bool = False) -> int:
        """Count notifications for a recipient."""
        pass

    @abstractmethod
    async def mark_read(self, notification_id: int, user_id: int) -> bool:
        """Mark one of the recipient's notifications as read."""
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: int) -> int:
        """Mark all of the recipient's notifications as read."""
        pass

    @abstractmethod
    async def delete(self, notification_id: int, user_id: int) -> bool:
        """Delete one of the recipient's notifications."""
        pass
