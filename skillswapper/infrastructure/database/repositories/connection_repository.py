"""
Connection repository implementation.
"""

from typing import Dict, List, Optional, Tuple

from sqlalchemy import JSON, case, func, literal, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from skillswapper.application.interfaces.repositories import ConnectionRepositoryInterface
from skillswapper.config.logging import get_logger
from skillswapper.domain.entities.connection import Connection, unordered_pair
from skillswapper.domain.entities.user import User
from skillswapper.domain.value_objects.connection_status import ConnectionStatus
from skillswapper.infrastructure.database.models import ConnectionModel, UserModel
from skillswapper.infrastructure.database.models.base import utcnow

from .mappers import connection_to_entity, user_to_entity
from .statements import dialect_insert

logger = get_logger(__name__)


class ConnectionRepository(ConnectionRepositoryInterface):
    """Connection repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_pair(self, low: int, high: int) -> Optional[ConnectionModel]:
        stmt = (
            select(ConnectionModel)
            .where(ConnectionModel.pair_low_id == low, ConnectionModel.pair_high_id == high)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_between(self, user_a: int, user_b: int) -> Optional[Connection]:
        """Get the connection for an unordered pair of users."""
        model = await self._get_pair(*unordered_pair(user_a, user_b))
        return connection_to_entity(model) if model else None

    async def upsert_proposal(self, connection: Connection) -> Connection:
        """Insert a pending proposal, or refresh the snapshot of the existing one.

        The stored snapshot always reads from the stored initiator's side, so a
        proposal coming from the original target is saved reversed. Status is
        left as it is.
        """
        low, high = connection.pair
        now = utcnow()

        insert_stmt = dialect_insert(self.db, ConnectionModel).values(
            user1_id=connection.user1_id,
            user2_id=connection.user2_id,
            pair_low_id=low,
            pair_high_id=high,
            matched_skills=connection.matched_skills.to_dict(),
            status=connection.status.value,
            created_at=now,
            updated_at=now,
        )
        excluded = insert_stmt.excluded
        stmt = insert_stmt.on_conflict_do_update(
            index_elements=[ConnectionModel.pair_low_id, ConnectionModel.pair_high_id],
            set_={
                "matched_skills": case(
                    (ConnectionModel.user1_id == excluded.user1_id, excluded.matched_skills),
                    else_=literal(connection.matched_skills.reversed().to_dict(), type_=JSON),
                ),
                "updated_at": now,
            },
        )
        await self.db.execute(stmt)

        model = await self._get_pair(low, high)
        logger.info(
            "Connection proposal saved",
            connection_id=model.id,
            initiator_id=connection.user1_id,
            target_id=connection.user2_id,
            status=model.status,
        )
        return connection_to_entity(model)

    async def transition_pending(
        self, user_a: int, user_b: int, status: ConnectionStatus
    ) -> Optional[Connection]:
        """Move a pending connection of the pair to ``status``.

        The status predicate lives in the UPDATE itself, so of two racing
        responses only the first one matches a row.
        """
        low, high = unordered_pair(user_a, user_b)
        stmt = (
            update(ConnectionModel)
            .where(
                ConnectionModel.pair_low_id == low,
                ConnectionModel.pair_high_id == high,
                ConnectionModel.status == ConnectionStatus.PENDING.value,
            )
            .values(status=status.value, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount == 0:
            return None

        model = await self._get_pair(low, high)
        logger.info("Connection transitioned", connection_id=model.id, status=status.value)
        return connection_to_entity(model)

    async def list_for_user(
        self,
        user_id: int,
        status: Optional[ConnectionStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[List[Tuple[Connection, User]], int]:
        """Connections involving a user with the other party, and the total."""
        filters = [or_(ConnectionModel.user1_id == user_id, ConnectionModel.user2_id == user_id)]
        if status is not None:
            filters.append(ConnectionModel.status == status.value)

        other_id = case(
            (ConnectionModel.user1_id == user_id, ConnectionModel.user2_id),
            else_=ConnectionModel.user1_id,
        )
        stmt = (
            select(ConnectionModel, UserModel)
            .join(UserModel, UserModel.id == other_id)
            .where(*filters)
            .order_by(ConnectionModel.updated_at.desc(), ConnectionModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.db.execute(stmt)
        rows = [
            (connection_to_entity(connection), user_to_entity(other))
            for connection, other in result.all()
        ]

        total_stmt = select(func.count(ConnectionModel.id)).where(*filters)
        total = (await self.db.execute(total_stmt)).scalar_one()

        return rows, int(total)

    async def count_by_status(self, user_id: Optional[int] = None) -> Dict[str, int]:
        """Connection counts per status, for one user or platform-wide."""
        stmt = select(ConnectionModel.status, func.count(ConnectionModel.id)).group_by(
            ConnectionModel.status
        )
        if user_id is not None:
            stmt = stmt.where(
                or_(ConnectionModel.user1_id == user_id, ConnectionModel.user2_id == user_id)
            )
        result = await self.db.execute(stmt)

        counts = {status.value: 0 for status in ConnectionStatus}
        for status, count in result.all():
            counts[status] = int(count)
        return counts
