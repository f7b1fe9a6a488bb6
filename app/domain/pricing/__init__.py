"""Cálculo de precios de renta por categoría."""

from app.domain.pricing.calculators import (
    PRICE_CALCULATORS,
    PriceCalculator,
    combi_price,
    small_car_price,
    truck_price,
)
from app.domain.pricing.config import PriceCalculationConfig
from app.domain.pricing.resolver import PriceCalculatorResolver

__all__ = [
    "PRICE_CALCULATORS",
    "PriceCalculationConfig",
    "PriceCalculator",
    "PriceCalculatorResolver",
    "combi_price",
    "small_car_price",
    "truck_price",
]
