import logging
from datetime import datetime

from email_validator import EmailNotValidError, validate_email

from app.application.interfaces.booking_number_generator import BookingNumberGenerator
from app.application.interfaces.clock import Clock
from app.application.interfaces.rental_repo import RentalRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.domain.entities.rental import MAX_METER_READING, CarCategory, Rental, RentalStatus
from app.domain.errors import ValidationError
from app.domain.value_objects.rental_period import ensure_utc

MAX_IDENTIFIER_LENGTH = 20


def _require_identifier(field: str, value: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{field} is required", field=field)
    if len(cleaned) > MAX_IDENTIFIER_LENGTH:
        raise ValidationError(
            f"{field} must be between 1 and {MAX_IDENTIFIER_LENGTH} characters",
            field=field,
        )
    return cleaned


def _coerce_category(value: CarCategory | str) -> CarCategory:
    try:
        return CarCategory(value)
    except ValueError as exc:
        raise ValidationError(f"Invalid car category: {value!r}", field="category") from exc


def _normalize_email(value: str) -> str:
    try:
        return validate_email(value, check_deliverability=False).normalized
    except EmailNotValidError as exc:
        raise ValidationError(
            f"Invalid email address format: {exc}", field="email_address"
        ) from exc


class RegisterPickupUseCase:
    def __init__(
        self,
        rental_repo: RentalRepo,
        booking_number_generator: BookingNumberGenerator,
        clock: Clock,
        transaction_manager: TransactionManager,
    ) -> None:
        self._rental_repo = rental_repo
        self._booking_number_generator = booking_number_generator
        self._clock = clock
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        registration_number: str,
        customer_id: str,
        category: CarCategory | str,
        pickup_datetime: datetime,
        pickup_meter_reading: int,
        email_address: str,
    ) -> Rental:
        rental = Rental(
            booking_number=self._booking_number_generator.generate(),
            registration_number=_require_identifier("registration_number", registration_number),
            customer_id=_require_identifier("customer_id", customer_id),
            category=_coerce_category(category),
            pickup_datetime=ensure_utc(pickup_datetime),
            pickup_meter_reading=self._validate_meter(pickup_meter_reading),
            email_address=_normalize_email(email_address),
            status=RentalStatus.ACTIVE,
            created_at=self._clock.now(),
        )

        async with self._transaction_manager.start():
            saved = await self._rental_repo.insert(rental)

        self._logger.info(
            "Rental pickup registered",
            extra={
                "booking_number": str(saved.booking_number),
                "registration_number": saved.registration_number,
                "category": saved.category.value,
            },
        )
        return saved

    @staticmethod
    def _validate_meter(value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(
                "Pickup meter reading must be an integer", field="pickup_meter_reading"
            )
        if value < 0 or value > MAX_METER_READING:
            raise ValidationError(
                f"Meter reading must be between 0 and {MAX_METER_READING}",
                field="pickup_meter_reading",
            )
        return value
