"""Entidad Rental - Agregado raíz del dominio."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from app.domain.errors import RentalAlreadyCompletedError
from app.domain.value_objects.booking_number import BookingNumber
from app.domain.value_objects.rental_period import RentalPeriod

# Odómetro de 8 dígitos; acota también el precio máximo que se persiste
MAX_METER_READING = 99_999_999


class CarCategory(str, Enum):
    """Categorías de vehículo; cada una tiene exactamente una fórmula de precio."""

    SMALL_CAR = "SmallCar"
    COMBI = "Combi"
    TRUCK = "Truck"


class RentalStatus(str, Enum):
    """Estados posibles de una renta."""

    ACTIVE = "Active"
    COMPLETED = "Completed"


@dataclass
class Rental:
    """
    Entidad principal del dominio - Agregado Raíz.

    Representa la renta de un vehículo desde el pickup hasta la devolución.
    Mientras está activa no tiene datos de devolución ni precio; al completarse
    tiene los tres.
    """

    # Identificadores
    booking_number: BookingNumber
    id: int | None = None

    # Vehículo y cliente
    registration_number: str = ""
    customer_id: str = ""
    email_address: str = ""
    category: CarCategory = CarCategory.SMALL_CAR

    # Pickup
    pickup_datetime: datetime | None = None
    pickup_meter_reading: int = 0

    # Devolución
    return_datetime: datetime | None = None
    return_meter_reading: int | None = None
    calculated_price: Decimal | None = None

    # Estado
    status: RentalStatus = RentalStatus.ACTIVE

    # Timestamps
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # === Propiedades calculadas ===

    @property
    def is_active(self) -> bool:
        return self.status == RentalStatus.ACTIVE

    @property
    def is_completed(self) -> bool:
        return self.status == RentalStatus.COMPLETED

    @property
    def is_invoiceable(self) -> bool:
        """Solo una renta completada tiene precio y puede facturarse."""
        return self.is_completed

    @property
    def rental_period(self) -> RentalPeriod | None:
        """Retorna el periodo de la renta como Value Object."""
        if self.pickup_datetime and self.return_datetime:
            return RentalPeriod(start=self.pickup_datetime, end=self.return_datetime)
        return None

    @property
    def number_of_days(self) -> int | None:
        period = self.rental_period
        return period.rental_days if period else None

    @property
    def number_of_km(self) -> int | None:
        if self.return_meter_reading is None:
            return None
        return self.return_meter_reading - self.pickup_meter_reading

    # === Métodos de negocio ===

    def complete(
        self,
        return_datetime: datetime,
        return_meter_reading: int,
        calculated_price: Decimal,
        completed_at: datetime,
    ) -> None:
        """
        Registra la devolución y cierra la renta.

        Las precondiciones de fechas y lecturas las valida el caso de uso antes
        de llamar aquí; esta operación solo protege la transición única.
        """
        if not self.is_active:
            raise RentalAlreadyCompletedError(str(self.booking_number))
        self.return_datetime = return_datetime
        self.return_meter_reading = return_meter_reading
        self.calculated_price = calculated_price
        self.status = RentalStatus.COMPLETED
        self.updated_at = completed_at
