"""Structured results of connection workflow operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from skillswapper.domain.entities.connection import Connection
from skillswapper.domain.entities.user import User


class ConnectionFailure(str, Enum):
    """Why a connection operation did not take effect."""

    SELF_REFERENCE = "self_reference"
    INVALID_TARGET = "invalid_target"
    NOT_FOUND = "not_found"


@dataclass
class ConnectionOutcome:
    """Result of propose/accept/decline.

    Exactly one of ``connection`` and ``failure`` is set.
    """

    connection: Optional[Connection] = None
    failure: Optional[ConnectionFailure] = None
    counterpart: Optional[User] = None
    created: bool = False
    emails_sent: int = 0

    @property
    def succeeded(self) -> bool:
        return self.failure is None

    @classmethod
    def failed(cls, failure: ConnectionFailure) -> "ConnectionOutcome":
        return cls(failure=failure)


def check_counterpart(user_id: int, other_user_id: Optional[int]) -> Optional[ConnectionFailure]:
    """Validate the counterpart id of a connection operation."""
    if other_user_id is None or other_user_id <= 0:
        return ConnectionFailure.INVALID_TARGET
    if other_user_id == user_id:
        return ConnectionFailure.SELF_REFERENCE
    return None
