"""Resolución de la fórmula de precio para una categoría."""

import logging
from decimal import Decimal
from typing import Mapping

from app.domain.entities.rental import CarCategory
from app.domain.errors import PriceCalculatorNotFoundError
from app.domain.pricing.calculators import PRICE_CALCULATORS, PriceCalculator
from app.domain.pricing.config import PriceCalculationConfig

logger = logging.getLogger(__name__)


class PriceCalculatorResolver:
    """
    Mapea una categoría a su fórmula de precio.

    Se construye una sola vez con el conjunto completo de fórmulas. Una
    categoría sin fórmula es un error de despliegue: nunca se usa una por
    defecto.
    """

    def __init__(self, calculators: Mapping[CarCategory, PriceCalculator] = PRICE_CALCULATORS):
        self._calculators = dict(calculators)

    def resolve(self, category: CarCategory) -> PriceCalculator:
        """
        Retorna la fórmula registrada para la categoría.

        Raises:
            PriceCalculatorNotFoundError: Si no hay fórmula para la categoría.
        """
        calculator = self._calculators.get(category)
        if calculator is None:
            label = category.value if isinstance(category, CarCategory) else str(category)
            logger.error("No price calculator registered", extra={"category": label})
            raise PriceCalculatorNotFoundError(label)
        return calculator

    def calculate_price(
        self,
        category: CarCategory,
        days: int,
        distance: int,
        config: PriceCalculationConfig,
    ) -> Decimal:
        return self.resolve(category)(days, distance, config)
