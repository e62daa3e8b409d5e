"""Propose connection use case."""

from typing import Optional

from skillswapper.application.interfaces.repositories import (
    ConnectionRepositoryInterface,
    UserRepositoryInterface,
)
from skillswapper.application.interfaces.services import TransactionServiceInterface
from skillswapper.application.services.connection_notifier import ConnectionNotifier
from skillswapper.application.services.skill_matcher import SkillMatcher
from skillswapper.application.use_cases.connection_outcome import (
    ConnectionFailure,
    ConnectionOutcome,
    check_counterpart,
)
from skillswapper.config.logging import get_logger
from skillswapper.domain.entities.connection import Connection
from skillswapper.infrastructure.monitoring.metrics import record_connection_proposal

logger = get_logger(__name__)


class ProposeConnectionUseCase:
    """Use case for proposing a skill swap to another user.

    The proposal is stored once per unordered pair of users. Proposing again
    refreshes the matched-skills snapshot but never the status, so a declined
    or accepted connection stays that way.
    """

    def __init__(
        self,
        user_repo: UserRepositoryInterface,
        connection_repo: ConnectionRepositoryInterface,
        matcher: SkillMatcher,
        notifier: ConnectionNotifier,
        transaction_service: TransactionServiceInterface,
    ):
        self.user_repo = user_repo
        self.connection_repo = connection_repo
        self.matcher = matcher
        self.notifier = notifier
        self.transaction_service = transaction_service

    async def execute(
        self, initiator_id: int, target_id: Optional[int], note: Optional[str] = None
    ) -> ConnectionOutcome:
        failure = check_counterpart(initiator_id, target_id)
        if failure:
            record_connection_proposal(failure.value)
            return ConnectionOutcome.failed(failure)

        initiator = await self.user_repo.get_profile(initiator_id)
        target = await self.user_repo.get_profile(target_id)
        if initiator is None or target is None:
            logger.warning(
                "Connection proposal for unknown user",
                initiator_id=initiator_id,
                target_id=target_id,
            )
            record_connection_proposal(ConnectionFailure.NOT_FOUND.value)
            return ConnectionOutcome.failed(ConnectionFailure.NOT_FOUND)

        snapshot = self.matcher.compare(initiator, target).snapshot(note=note)

        async def persist() -> Connection:
            return await self.connection_repo.upsert_proposal(
                Connection(user1_id=initiator_id, user2_id=target_id, matched_skills=snapshot)
            )

        existing = await self.connection_repo.get_between(initiator_id, target_id)
        connection = await self.transaction_service.execute_in_transaction(persist)
        created = existing is None

        logger.info(
            "Connection proposed",
            connection_id=connection.id,
            initiator_id=initiator_id,
            target_id=target_id,
            created=created,
            status=connection.status.value,
            match_score=snapshot.match_score,
        )
        record_connection_proposal("created" if created else "refreshed")

        # The proposal stands even if the notification cannot be stored
        try:
            await self.transaction_service.execute_in_transaction(
                lambda: self.notifier.notify_request(initiator.user, target_id, snapshot)
            )
        except Exception as e:
            logger.error(
                "Failed to create connection request notification",
                connection_id=connection.id,
                error=str(e),
            )

        return ConnectionOutcome(connection=connection, counterpart=target.user, created=created)
