"""Accept and decline connection use cases."""

from typing import Optional

from skillswapper.application.interfaces.repositories import (
    ConnectionRepositoryInterface,
    UserRepositoryInterface,
)
from skillswapper.application.interfaces.services import TransactionServiceInterface
from skillswapper.application.services.connection_notifier import ConnectionNotifier
from skillswapper.application.use_cases.connection_outcome import (
    ConnectionFailure,
    ConnectionOutcome,
    check_counterpart,
)
from skillswapper.config.logging import get_logger
from skillswapper.domain.value_objects.connection_status import ConnectionStatus
from skillswapper.infrastructure.monitoring.metrics import record_connection_transition

logger = get_logger(__name__)


class RespondToConnectionUseCase:
    """Use case for answering a pending connection request.

    The transition only applies while the connection is pending, so two
    concurrent responses for the same pair cannot both succeed. The new
    status is committed before any side effect runs; notification and email
    failures are logged and never undo it.
    """

    def __init__(
        self,
        user_repo: UserRepositoryInterface,
        connection_repo: ConnectionRepositoryInterface,
        notifier: ConnectionNotifier,
        transaction_service: TransactionServiceInterface,
    ):
        self.user_repo = user_repo
        self.connection_repo = connection_repo
        self.notifier = notifier
        self.transaction_service = transaction_service

    async def accept(self, accepter_id: int, requester_id: Optional[int]) -> ConnectionOutcome:
        return await self._respond(accepter_id, requester_id, ConnectionStatus.ACCEPTED)

    async def decline(self, decliner_id: int, requester_id: Optional[int]) -> ConnectionOutcome:
        return await self._respond(decliner_id, requester_id, ConnectionStatus.DECLINED)

    async def _respond(
        self, responder_id: int, requester_id: Optional[int], status: ConnectionStatus
    ) -> ConnectionOutcome:
        failure = check_counterpart(responder_id, requester_id)
        if failure:
            record_connection_transition(status.value, failure.value)
            return ConnectionOutcome.failed(failure)

        connection = await self.transaction_service.execute_in_transaction(
            lambda: self.connection_repo.transition_pending(responder_id, requester_id, status)
        )
        if connection is None:
            logger.info(
                "No pending connection to respond to",
                responder_id=responder_id,
                requester_id=requester_id,
                status=status.value,
            )
            record_connection_transition(status.value, ConnectionFailure.NOT_FOUND.value)
            return ConnectionOutcome.failed(ConnectionFailure.NOT_FOUND)

        logger.info(
            "Connection status changed",
            connection_id=connection.id,
            responder_id=responder_id,
            requester_id=requester_id,
            status=status.value,
        )
        record_connection_transition(status.value, "applied")

        responder = await self.user_repo.get_by_id(responder_id)
        requester = await self.user_repo.get_by_id(requester_id)
        outcome = ConnectionOutcome(connection=connection, counterpart=requester)
        if responder is None or requester is None:
            return outcome

        try:
            if status == ConnectionStatus.ACCEPTED:
                await self.transaction_service.execute_in_transaction(
                    lambda: self.notifier.notify_accepted(responder, requester_id)
                )
            else:
                await self.transaction_service.execute_in_transaction(
                    lambda: self.notifier.notify_declined(responder, requester_id)
                )
        except Exception as e:
            logger.error(
                "Failed to create connection response notification",
                connection_id=connection.id,
                status=status.value,
                error=str(e),
            )

        if status == ConnectionStatus.ACCEPTED:
            sent = await self.notifier.send_acceptance_emails(connection, requester, responder)
            outcome.emails_sent = sum(1 for ok in sent if ok)

        return outcome
