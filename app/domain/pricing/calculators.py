"""
Fórmulas de precio por categoría de vehículo.

Cada fórmula es una función pura ``(days, distance, config) -> Decimal``.
Los argumentos llegan validados por el caso de uso (enteros no negativos).
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Callable, Mapping

from app.domain.entities.rental import CarCategory
from app.domain.pricing.config import PriceCalculationConfig

PriceCalculator = Callable[[int, int, PriceCalculationConfig], Decimal]

COMBI_DAY_FACTOR = Decimal("1.3")
TRUCK_DAY_FACTOR = Decimal("1.5")
TRUCK_KM_FACTOR = Decimal("1.5")


def small_car_price(days: int, distance: int, config: PriceCalculationConfig) -> Decimal:
    """baseDayRental * days; la distancia no influye."""
    return config.base_day_rental * days


def combi_price(days: int, distance: int, config: PriceCalculationConfig) -> Decimal:
    """baseDayRental * days * 1.3 + baseKmPrice * distance."""
    return config.base_day_rental * days * COMBI_DAY_FACTOR + config.base_km_price * distance


def truck_price(days: int, distance: int, config: PriceCalculationConfig) -> Decimal:
    """baseDayRental * days * 1.5 + baseKmPrice * distance * 1.5."""
    return (
        config.base_day_rental * days * TRUCK_DAY_FACTOR
        + config.base_km_price * distance * TRUCK_KM_FACTOR
    )


PRICE_CALCULATORS: Mapping[CarCategory, PriceCalculator] = MappingProxyType(
    {
        CarCategory.SMALL_CAR: small_car_price,
        CarCategory.COMBI: combi_price,
        CarCategory.TRUCK: truck_price,
    }
)
