import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from app.application.interfaces.transaction_manager import TransactionManager
from app.infrastructure.in_memory.rental_repo import InMemoryRentalRepo


class InMemoryTransactionManager(TransactionManager):
    """
    Transacciones serializadas sobre el repositorio in-memory.

    Un solo bloque ``start()`` corre a la vez; si termina con excepción se
    restaura el estado previo del repositorio. No es reentrante.
    """

    def __init__(self, rental_repo: InMemoryRentalRepo) -> None:
        self._rental_repo = rental_repo
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        async with self._lock:
            snapshot = dict(self._rental_repo.rentals)
            next_id = self._rental_repo._next_id
            try:
                yield
            except BaseException:
                self._rental_repo.rentals = snapshot
                self._rental_repo._next_id = next_id
                raise
