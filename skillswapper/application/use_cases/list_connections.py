"""List saved connections use case."""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from skillswapper.application.interfaces.repositories import ConnectionRepositoryInterface
from skillswapper.config.logging import get_logger
from skillswapper.domain.entities.connection import Connection
from skillswapper.domain.entities.user import User
from skillswapper.domain.value_objects.connection_status import ConnectionStatus

logger = get_logger(__name__)


@dataclass
class ConnectionView:
    """A connection as seen by one of its parties."""

    connection: Connection
    viewer_id: int
    other_user: User

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.connection.id,
            "otherUser": {
                "id": self.other_user.id,
                "name": self.other_user.name,
                "profile_pic": self.other_user.profile_pic,
            },
            "matchDetails": self.connection.skills_for(self.viewer_id).to_dict(),
            "status": self.connection.status.value,
            "isInitiator": self.connection.is_initiator(self.viewer_id),
            "createdAt": self.connection.created_at,
            "updatedAt": self.connection.updated_at,
        }


@dataclass
class ConnectionPage:
    items: List[ConnectionView]
    total: int
    limit: int
    offset: int

    def pagination(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "limit": self.limit,
            "offset": self.offset,
            "hasMore": self.offset + len(self.items) < self.total,
            "totalPages": math.ceil(self.total / self.limit) if self.limit else 0,
            "currentPage": self.offset // self.limit + 1 if self.limit else 1,
        }


class ListConnectionsUseCase:
    """Use case for listing the connections a user takes part in."""

    def __init__(self, connection_repo: ConnectionRepositoryInterface):
        self.connection_repo = connection_repo

    async def execute(
        self,
        user_id: int,
        status: Optional[ConnectionStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> ConnectionPage:
        rows, total = await self.connection_repo.list_for_user(
            user_id, status=status, limit=limit, offset=offset
        )
        items = [
            ConnectionView(connection=connection, viewer_id=user_id, other_user=other)
            for connection, other in rows
        ]

        logger.debug(
            "Listed connections",
            user_id=user_id,
            status=status.value if status else None,
            returned=len(items),
            total=total,
        )
        return ConnectionPage(items=items, total=total, limit=limit, offset=offset)
