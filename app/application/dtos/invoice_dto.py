"""DTOs para facturas."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from app.domain.entities.rental import Rental


@dataclass(frozen=True)
class InvoiceDTO:
    """Proyección de una renta completada con lo que necesita el documento."""

    booking_number: str
    customer_id: str
    email_address: str
    registration_number: str
    category: str
    status: str
    pickup_datetime: datetime
    pickup_meter_reading: int
    return_datetime: datetime | None
    return_meter_reading: int | None
    number_of_days: int | None
    number_of_km: int | None
    calculated_price: Decimal | None
    issued_at: datetime


@dataclass(frozen=True)
class InvoiceDocument:
    """Documento generado listo para enviarse al cliente."""

    content: bytes
    filename: str
    media_type: str = "application/pdf"


def build_invoice_dto(rental: Rental, issued_at: datetime) -> InvoiceDTO:
    """Convierte la entidad campo por campo; sin mapeo reflexivo."""
    return InvoiceDTO(
        booking_number=str(rental.booking_number),
        customer_id=rental.customer_id,
        email_address=rental.email_address,
        registration_number=rental.registration_number,
        category=rental.category.value,
        status=rental.status.value,
        pickup_datetime=rental.pickup_datetime,
        pickup_meter_reading=rental.pickup_meter_reading,
        return_datetime=rental.return_datetime,
        return_meter_reading=rental.return_meter_reading,
        number_of_days=rental.number_of_days,
        number_of_km=rental.number_of_km,
        calculated_price=rental.calculated_price,
        issued_at=issued_at,
    )
