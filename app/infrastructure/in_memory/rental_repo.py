import asyncio
from dataclasses import replace
from typing import Sequence

from app.application.interfaces.rental_repo import RentalRepo
from app.domain.entities.rental import Rental, RentalStatus
from app.domain.errors import (
    BookingNumberAlreadyExistsError,
    RentalAlreadyCompletedError,
    RentalNotFoundError,
)
from app.domain.value_objects.booking_number import BookingNumber


class InMemoryRentalRepo(RentalRepo):
    def __init__(self) -> None:
        self.rentals: dict[BookingNumber, Rental] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def insert(self, rental: Rental) -> Rental:
        async with self._lock:
            if rental.booking_number in self.rentals:
                raise BookingNumberAlreadyExistsError(str(rental.booking_number))
            stored = replace(rental, id=self._next_id)
            self._next_id += 1
            self.rentals[stored.booking_number] = stored
            return replace(stored)

    async def complete(self, rental: Rental) -> Rental:
        async with self._lock:
            current = self.rentals.get(rental.booking_number)
            if current is None:
                raise RentalNotFoundError(str(rental.booking_number))
            # Compare-and-swap: only the writer that still sees Active wins
            if current.status != RentalStatus.ACTIVE:
                raise RentalAlreadyCompletedError(str(rental.booking_number))
            stored = replace(
                current,
                return_datetime=rental.return_datetime,
                return_meter_reading=rental.return_meter_reading,
                calculated_price=rental.calculated_price,
                status=rental.status,
                updated_at=rental.updated_at,
            )
            self.rentals[stored.booking_number] = stored
            return replace(stored)

    async def get_by_booking_number(self, booking_number: BookingNumber) -> Rental | None:
        stored = self.rentals.get(booking_number)
        return replace(stored) if stored else None

    async def list_all(self) -> Sequence[Rental]:
        return [replace(r) for r in sorted(self.rentals.values(), key=lambda r: r.id)]

    async def list_by_status(self, status: RentalStatus) -> Sequence[Rental]:
        return [r for r in await self.list_all() if r.status == status]
