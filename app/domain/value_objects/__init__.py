"""Value Objects del dominio de rentas."""

from app.domain.value_objects.booking_number import BookingNumber
from app.domain.value_objects.rental_period import RentalPeriod, ensure_utc

__all__ = [
    "BookingNumber",
    "RentalPeriod",
    "ensure_utc",
]
