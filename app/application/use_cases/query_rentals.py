from app.application.interfaces.rental_repo import RentalRepo
from app.domain.entities.rental import Rental, RentalStatus
from app.domain.value_objects.booking_number import BookingNumber


class GetRentalUseCase:
    def __init__(self, rental_repo: RentalRepo) -> None:
        self._rental_repo = rental_repo

    async def execute(self, booking_number: str) -> Rental | None:
        """
        Busca una renta por número de reserva.

        Un número mal formado se trata igual que una búsqueda sin resultado:
        retorna None en lugar de fallar.
        """
        try:
            parsed = BookingNumber.parse(booking_number)
        except ValueError:
            return None
        return await self._rental_repo.get_by_booking_number(parsed)


class ListRentalsUseCase:
    def __init__(self, rental_repo: RentalRepo) -> None:
        self._rental_repo = rental_repo

    async def execute(self) -> list[Rental]:
        return list(await self._rental_repo.list_all())


class ListActiveRentalsUseCase:
    def __init__(self, rental_repo: RentalRepo) -> None:
        self._rental_repo = rental_repo

    async def execute(self) -> list[Rental]:
        return list(await self._rental_repo.list_by_status(RentalStatus.ACTIVE))
