"""Interface RentalRepo - Puerto de almacenamiento de rentas."""

from typing import Sequence

from app.domain.entities.rental import Rental, RentalStatus
from app.domain.value_objects.booking_number import BookingNumber


class RentalRepo:
    async def insert(self, rental: Rental) -> Rental:
        """
        Persiste una renta nueva.

        Returns:
            Copia de la renta con el ``id`` asignado por el almacenamiento.

        Raises:
            BookingNumberAlreadyExistsError: Si el número de reserva ya existe.
        """
        raise NotImplementedError

    async def complete(self, rental: Rental) -> Rental:
        """
        Escribe la transición Active -> Completed (compare-and-swap de status).

        Solo un escritor puede observar el estado Active y confirmar el cierre;
        el perdedor recibe el conflicto.

        Raises:
            RentalNotFoundError: Si la renta no existe.
            RentalAlreadyCompletedError: Si la renta almacenada ya no está activa.
        """
        raise NotImplementedError

    async def get_by_booking_number(self, booking_number: BookingNumber) -> Rental | None:
        raise NotImplementedError

    async def list_all(self) -> Sequence[Rental]:
        raise NotImplementedError

    async def list_by_status(self, status: RentalStatus) -> Sequence[Rental]:
        raise NotImplementedError
