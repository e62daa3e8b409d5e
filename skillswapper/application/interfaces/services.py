"""
Service interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar

from skillswapper.domain.entities.user import User
from skillswapper.domain.value_objects.matched_skills import MatchedSkills

T = TypeVar("T")


class TransactionServiceInterface(ABC):
    """Interface for unit-of-work style transaction control."""

    @abstractmethod
    async def execute_in_transaction(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Run an operation and commit, rolling back on error."""
        pass


class ConnectionMailerInterface(ABC):
    """Interface for the emails sent when a connection is accepted."""

    @abstractmethod
    async def send_connection_accepted_to_requester(
        self, requester: User, accepter: User, skills: MatchedSkills
    ) -> bool:
        """Tell the requester their proposal was accepted.

        ``skills`` is seen from the requester's perspective.
        """
        pass

    @abstractmethod
    async def send_connection_accepted_to_accepter(
        self, accepter: User, requester: User, skills: MatchedSkills
    ) -> bool:
        """Confirm the new connection to the accepter.

        ``skills`` is seen from the accepter's perspective.
        """
        pass


class PasswordHasherInterface(ABC):
    """Interface for password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plaintext password."""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: Optional[str]) -> bool:
        """Check a plaintext password against a stored hash."""
        pass


class TokenServiceInterface(ABC):
    """Interface for issuing and verifying bearer tokens."""

    @abstractmethod
    def create_access_token(self, subject: str, role: str = "user", **claims: Any) -> str:
        """Issue a signed access token."""
        pass

    @abstractmethod
    def decode(self, token: str) -> Dict[str, Any]:
        """Verify a token and return its claims."""
        pass
