import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.transaction_manager import TransactionManager

logger = logging.getLogger(__name__)


class SQLAlchemyTransactionManager(TransactionManager):
    """
    Runs a rental unit of work as one database transaction.

    Commits when the block exits cleanly; a domain rejection raised inside the
    block (conflict, bad meter reading, missing price formula) rolls back
    everything the block wrote. A transaction the session already autobegun
    (e.g. after an earlier read) is joined and finished the same way, so a
    successful block is always durable.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        if self._session.in_transaction():
            try:
                yield
            except Exception as exc:
                await self._session.rollback()
                self._log_rollback(exc)
                raise
            await self._session.commit()
            return

        try:
            async with self._session.begin():
                yield
        except Exception as exc:
            self._log_rollback(exc)
            raise

    @staticmethod
    def _log_rollback(exc: Exception) -> None:
        logger.warning(
            "Rental transaction rolled back",
            extra={"error_type": type(exc).__name__},
        )
