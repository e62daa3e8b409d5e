"""
Unit of work over the request's database session.
"""

from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from skillswapper.application.interfaces.services import TransactionServiceInterface
from skillswapper.config.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TransactionService(TransactionServiceInterface):
    """Commits the work of a use case as one unit on the shared session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def execute_in_transaction(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Await ``operation`` and commit its writes; any error rolls them back and propagates."""
        try:
            result = await operation()
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.warning("Unit of work rolled back", error=str(e), error_type=type(e).__name__)
            raise

        logger.debug("Unit of work committed")
        return result
