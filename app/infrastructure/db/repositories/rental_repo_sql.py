from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.rental_repo import RentalRepo
from app.domain.entities.rental import CarCategory, Rental, RentalStatus
from app.domain.errors import (
    BookingNumberAlreadyExistsError,
    RentalAlreadyCompletedError,
    RentalNotFoundError,
)
from app.domain.value_objects.booking_number import BookingNumber
from app.domain.value_objects.rental_period import ensure_utc
from app.infrastructure.db.tables import rentals


def _utc_or_none(value: datetime | None) -> datetime | None:
    return ensure_utc(value) if value is not None else None


def row_to_rental(row: Mapping[str, Any]) -> Rental:
    price = row["calculated_price"]
    return Rental(
        id=row["id"],
        booking_number=BookingNumber(value=row["booking_number"]),
        registration_number=row["registration_number"],
        customer_id=row["customer_id"],
        email_address=row["email_address"],
        category=CarCategory(row["category"]),
        pickup_datetime=ensure_utc(row["pickup_datetime"]),
        pickup_meter_reading=row["pickup_meter_reading"],
        return_datetime=_utc_or_none(row["return_datetime"]),
        return_meter_reading=row["return_meter_reading"],
        calculated_price=Decimal(str(price)) if price is not None else None,
        status=RentalStatus(row["status"]),
        created_at=ensure_utc(row["created_at"]),
        updated_at=_utc_or_none(row["updated_at"]),
    )


def rental_to_row(rental: Rental) -> dict[str, Any]:
    return {
        "booking_number": str(rental.booking_number),
        "registration_number": rental.registration_number,
        "customer_id": rental.customer_id,
        "email_address": rental.email_address,
        "category": rental.category.value,
        "pickup_datetime": rental.pickup_datetime,
        "pickup_meter_reading": rental.pickup_meter_reading,
        "return_datetime": rental.return_datetime,
        "return_meter_reading": rental.return_meter_reading,
        "calculated_price": rental.calculated_price,
        "status": rental.status.value,
        "created_at": rental.created_at,
        "updated_at": rental.updated_at,
    }


class RentalRepoSQL(RentalRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, rental: Rental) -> Rental:
        stmt = insert(rentals).values(rental_to_row(rental))
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as exc:
            raise BookingNumberAlreadyExistsError(str(rental.booking_number)) from exc
        rental_id = result.inserted_primary_key[0]
        saved = await self.get_by_booking_number(rental.booking_number)
        if saved is None or saved.id != rental_id:
            raise RuntimeError(f"Inserted rental {rental.booking_number} could not be read back")
        return saved

    async def complete(self, rental: Rental) -> Rental:
        # Compare-and-swap on status: the WHERE clause only matches while Active
        stmt = (
            update(rentals)
            .where(
                rentals.c.booking_number == str(rental.booking_number),
                rentals.c.status == RentalStatus.ACTIVE.value,
            )
            .values(
                return_datetime=rental.return_datetime,
                return_meter_reading=rental.return_meter_reading,
                calculated_price=rental.calculated_price,
                status=rental.status.value,
                updated_at=rental.updated_at,
            )
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            current = await self.get_by_booking_number(rental.booking_number)
            if current is None:
                raise RentalNotFoundError(str(rental.booking_number))
            raise RentalAlreadyCompletedError(str(rental.booking_number))

        saved = await self.get_by_booking_number(rental.booking_number)
        if saved is None:
            raise RentalNotFoundError(str(rental.booking_number))
        return saved

    async def get_by_booking_number(self, booking_number: BookingNumber) -> Rental | None:
        stmt = select(rentals).where(rentals.c.booking_number == str(booking_number)).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return row_to_rental(row)

    async def list_all(self) -> Sequence[Rental]:
        result = await self._session.execute(select(rentals).order_by(rentals.c.id))
        return [row_to_rental(row) for row in result.mappings().all()]

    async def list_by_status(self, status: RentalStatus) -> Sequence[Rental]:
        stmt = select(rentals).where(rentals.c.status == status.value).order_by(rentals.c.id)
        result = await self._session.execute(stmt)
        return [row_to_rental(row) for row in result.mappings().all()]
