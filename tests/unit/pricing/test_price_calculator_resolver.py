from decimal import Decimal

import pytest

from app.domain.entities.rental import CarCategory
from app.domain.errors import ConfigurationError, PriceCalculatorNotFoundError
from app.domain.pricing.calculators import combi_price, small_car_price, truck_price
from app.domain.pricing.config import PriceCalculationConfig
from app.domain.pricing.resolver import PriceCalculatorResolver


@pytest.mark.parametrize(
    "category,expected",
    [
        (CarCategory.SMALL_CAR, small_car_price),
        (CarCategory.COMBI, combi_price),
        (CarCategory.TRUCK, truck_price),
    ],
)
def test_resolves_registered_calculator(category, expected):
    assert PriceCalculatorResolver().resolve(category) is expected


def test_unknown_category_raises_configuration_error():
    resolver = PriceCalculatorResolver({CarCategory.SMALL_CAR: small_car_price})

    with pytest.raises(PriceCalculatorNotFoundError) as exc_info:
        resolver.resolve(CarCategory.TRUCK)

    assert isinstance(exc_info.value, ConfigurationError)
    assert exc_info.value.message == "no calculator for category Truck"
    assert exc_info.value.code == "PRICE_CALCULATOR_NOT_FOUND"


def test_empty_table_never_falls_back_to_a_default():
    with pytest.raises(PriceCalculatorNotFoundError):
        PriceCalculatorResolver({}).resolve(CarCategory.SMALL_CAR)


def test_calculate_price_uses_resolved_formula():
    config = PriceCalculationConfig(base_day_rental=Decimal("100"), base_km_price=Decimal("5"))
    resolver = PriceCalculatorResolver()
    assert resolver.calculate_price(CarCategory.COMBI, 5, 800, config) == Decimal("4650")


def test_resolver_copies_the_table():
    table = {CarCategory.SMALL_CAR: small_car_price}
    resolver = PriceCalculatorResolver(table)
    table[CarCategory.TRUCK] = truck_price

    with pytest.raises(PriceCalculatorNotFoundError):
        resolver.resolve(CarCategory.TRUCK)
