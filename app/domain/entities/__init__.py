"""Entidades del dominio de rentas."""

from app.domain.entities.rental import MAX_METER_READING, CarCategory, Rental, RentalStatus

__all__ = [
    "Rental",
    "RentalStatus",
    "CarCategory",
    "MAX_METER_READING",
]
