"""Interfaces (Puertos) de la capa de aplicación."""

from app.application.interfaces.booking_number_generator import (
    BookingNumberGenerator,
    FakeBookingNumberGenerator,
    RandomBookingNumberGenerator,
)
from app.application.interfaces.clock import Clock, FakeClock, SystemClock
from app.application.interfaces.invoice_renderer import InvoiceRenderer
from app.application.interfaces.rental_repo import RentalRepo
from app.application.interfaces.transaction_manager import TransactionManager

__all__ = [
    # Repositories
    "RentalRepo",
    # Renderers
    "InvoiceRenderer",
    # Infrastructure
    "TransactionManager",
    # Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
    "BookingNumberGenerator",
    "RandomBookingNumberGenerator",
    "FakeBookingNumberGenerator",
]
