"""Interface TransactionManager - Puerto para delimitar unidades de trabajo."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol


class TransactionManager(Protocol):
    """
    Delimita una unidad de trabajo sobre el repositorio de rentas.

    Todo lo escrito dentro de ``start()`` se confirma al salir del bloque, o se
    descarta por completo si el bloque lanza una excepción. Así una devolución
    rechazada nunca deja la renta parcialmente actualizada.
    """

    def start(self) -> AbstractAsyncContextManager[None]:
        ...
