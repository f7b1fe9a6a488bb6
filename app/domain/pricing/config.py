"""Configuración de tarifas para el cálculo de precios."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PriceCalculationConfig:
    """
    Tarifas base usadas por todas las fórmulas.

    Se construye una vez al iniciar el proceso y se inyecta en el caso de uso
    de devolución; no se persiste por renta.

    Attributes:
        base_day_rental: Tarifa base por día.
        base_km_price: Tarifa base por kilómetro.
    """

    base_day_rental: Decimal
    base_km_price: Decimal

    def __post_init__(self) -> None:
        for name in ("base_day_rental", "base_km_price"):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                value = Decimal(str(value))
                object.__setattr__(self, name, value)
            if value <= 0:
                raise ValueError(f"{name} debe ser positivo: {value}")
