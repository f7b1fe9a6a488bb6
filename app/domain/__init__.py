"""
Capa de Dominio - Servicio de Rentas.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.
Incluye entidades, value objects, fórmulas de precio y excepciones de dominio.

Estructura:
- entities/: Entidades del dominio (Rental)
- value_objects/: Objetos de valor inmutables (BookingNumber, RentalPeriod)
- pricing/: Fórmulas de precio por categoría y su resolución
- errors.py: Excepciones específicas del dominio
"""

from app.domain.entities import CarCategory, Rental, RentalStatus
from app.domain.errors import (
    BookingNumberAlreadyExistsError,
    ConfigurationError,
    ConflictError,
    DomainError,
    InvoiceNotReadyError,
    NotFoundError,
    PriceCalculatorNotFoundError,
    RentalAlreadyCompletedError,
    RentalNotFoundError,
    ValidationError,
)
from app.domain.pricing import PriceCalculationConfig, PriceCalculatorResolver
from app.domain.value_objects import BookingNumber, RentalPeriod

__all__ = [
    # Entities
    "Rental",
    "RentalStatus",
    "CarCategory",
    # Value Objects
    "BookingNumber",
    "RentalPeriod",
    # Pricing
    "PriceCalculationConfig",
    "PriceCalculatorResolver",
    # Errors
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "ConfigurationError",
    "RentalNotFoundError",
    "RentalAlreadyCompletedError",
    "BookingNumberAlreadyExistsError",
    "InvoiceNotReadyError",
    "PriceCalculatorNotFoundError",
]
