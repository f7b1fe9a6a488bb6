"""
Capa de Aplicación - Servicio de Rentas.

Esta capa contiene los casos de uso, DTOs e interfaces (puertos).
Orquesta la lógica de negocio y define los contratos con la infraestructura.

Estructura:
- use_cases/: Casos de uso del sistema (pickup, devolución, consultas, factura)
- dtos/: Data Transfer Objects
- interfaces/: Puertos (contratos para adaptadores)
"""

from app.application.dtos import InvoiceDocument, InvoiceDTO, build_invoice_dto
from app.application.interfaces import (
    BookingNumberGenerator,
    Clock,
    FakeBookingNumberGenerator,
    FakeClock,
    InvoiceRenderer,
    RandomBookingNumberGenerator,
    RentalRepo,
    SystemClock,
    TransactionManager,
)

__all__ = [
    # DTOs
    "InvoiceDTO",
    "InvoiceDocument",
    "build_invoice_dto",
    # Interfaces - Repositories
    "RentalRepo",
    # Interfaces - Renderers
    "InvoiceRenderer",
    # Interfaces - Infrastructure
    "TransactionManager",
    # Interfaces - Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
    "BookingNumberGenerator",
    "RandomBookingNumberGenerator",
    "FakeBookingNumberGenerator",
]
