import logging
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from app.application.interfaces.clock import Clock
from app.application.interfaces.rental_repo import RentalRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.domain.entities.rental import MAX_METER_READING, Rental
from app.domain.errors import RentalAlreadyCompletedError, RentalNotFoundError, ValidationError
from app.domain.pricing.config import PriceCalculationConfig
from app.domain.pricing.resolver import PriceCalculatorResolver
from app.domain.value_objects.booking_number import BookingNumber
from app.domain.value_objects.rental_period import RentalPeriod, ensure_utc

CENT = Decimal("0.01")


class RegisterReturnUseCase:
    """
    Registra la devolución de un vehículo y calcula el precio final.

    Las precondiciones se evalúan en orden y todas antes de mutar la renta:
    número de reserva bien formado, renta existente, renta activa, devolución
    no anterior al pickup y lectura final no menor a la inicial.
    """

    def __init__(
        self,
        rental_repo: RentalRepo,
        price_resolver: PriceCalculatorResolver,
        price_config: PriceCalculationConfig,
        clock: Clock,
        transaction_manager: TransactionManager,
    ) -> None:
        self._rental_repo = rental_repo
        self._price_resolver = price_resolver
        self._price_config = price_config
        self._clock = clock
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        booking_number: str,
        return_datetime: datetime,
        return_meter_reading: int,
    ) -> Rental:
        try:
            parsed = BookingNumber.parse(booking_number)
        except ValueError as exc:
            raise ValidationError(
                f"malformed booking number: '{booking_number}'", field="booking_number"
            ) from exc

        if isinstance(return_meter_reading, bool) or not isinstance(return_meter_reading, int):
            raise ValidationError(
                "Return meter reading must be an integer", field="return_meter_reading"
            )
        if return_meter_reading > MAX_METER_READING:
            raise ValidationError(
                f"Return meter reading cannot exceed {MAX_METER_READING}",
                field="return_meter_reading",
            )
        returned_at = ensure_utc(return_datetime)

        async with self._transaction_manager.start():
            rental = await self._rental_repo.get_by_booking_number(parsed)
            if rental is None:
                raise RentalNotFoundError(str(parsed))
            if not rental.is_active:
                raise RentalAlreadyCompletedError(str(parsed))
            if returned_at < ensure_utc(rental.pickup_datetime):
                raise ValidationError(
                    "return before pickup: return date cannot be before pickup date",
                    field="return_datetime",
                )
            if return_meter_reading < rental.pickup_meter_reading:
                raise ValidationError(
                    "return meter below pickup meter: return meter reading cannot be "
                    "less than pickup meter reading",
                    field="return_meter_reading",
                )

            days = RentalPeriod(start=rental.pickup_datetime, end=returned_at).rental_days
            distance = return_meter_reading - rental.pickup_meter_reading
            price = self._price_resolver.calculate_price(
                rental.category, days, distance, self._price_config
            ).quantize(CENT, rounding=ROUND_HALF_UP)

            rental.complete(
                return_datetime=returned_at,
                return_meter_reading=return_meter_reading,
                calculated_price=price,
                completed_at=self._clock.now(),
            )
            saved = await self._rental_repo.complete(rental)

        self._logger.info(
            "Rental return registered",
            extra={
                "booking_number": str(saved.booking_number),
                "category": saved.category.value,
                "number_of_days": days,
                "number_of_km": distance,
                "calculated_price": str(saved.calculated_price),
            },
        )
        return saved
