from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, constr

from app.domain.entities.rental import MAX_METER_READING, CarCategory, Rental, RentalStatus

Identifier = constr(strip_whitespace=True, min_length=1, max_length=20)


class PickupRentalRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    registration_number: Identifier
    customer_id: Identifier
    category: CarCategory
    pickup_datetime: datetime
    pickup_meter_reading: int = Field(..., ge=0, le=MAX_METER_READING)
    email_address: EmailStr


class ReturnRentalRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    return_datetime: datetime
    return_meter_reading: int = Field(..., ge=0, le=MAX_METER_READING)


class RentalResponse(BaseModel):
    booking_number: str
    registration_number: str
    customer_id: str
    category: CarCategory
    pickup_datetime: datetime
    pickup_meter_reading: int
    return_datetime: datetime | None = None
    return_meter_reading: int | None = None
    calculated_price: Decimal | None = None
    status: RentalStatus
    number_of_days: int | None = None
    number_of_km: int | None = None
    email_address: str
    created_at: datetime
    updated_at: datetime | None = None


class ErrorResponse(BaseModel):
    path: str
    timestamp: datetime
    status_code: int
    message: str
    error_id: str | None = None
    details: str | None = None


def rental_to_response(rental: Rental) -> RentalResponse:
    return RentalResponse(
        booking_number=str(rental.booking_number),
        registration_number=rental.registration_number,
        customer_id=rental.customer_id,
        category=rental.category,
        pickup_datetime=rental.pickup_datetime,
        pickup_meter_reading=rental.pickup_meter_reading,
        return_datetime=rental.return_datetime,
        return_meter_reading=rental.return_meter_reading,
        calculated_price=rental.calculated_price,
        status=rental.status,
        number_of_days=rental.number_of_days,
        number_of_km=rental.number_of_km,
        email_address=rental.email_address,
        created_at=rental.created_at,
        updated_at=rental.updated_at,
    )
