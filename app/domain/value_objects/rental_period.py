"""Value Object RentalPeriod - rango entre pickup y devolución."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


def ensure_utc(value: datetime) -> datetime:
    """Normaliza un datetime a UTC; los valores naive se interpretan como UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class RentalPeriod:
    """
    Value Object inmutable que representa el periodo de una renta.

    Attributes:
        start: Fecha/hora de pickup.
        end: Fecha/hora de devolución (puede ser igual a start).
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", ensure_utc(self.start))
        object.__setattr__(self, "end", ensure_utc(self.end))
        if self.end < self.start:
            raise ValueError(
                f"end no puede ser anterior a start: {self.end} < {self.start}"
            )

    @property
    def duration(self) -> timedelta:
        """Retorna la duración del periodo."""
        return self.end - self.start

    @property
    def rental_days(self) -> int:
        """
        Calcula los días cobrables.

        Regla de negocio: cualquier fracción de día cuenta como día completo
        (25 horas = 2 días). Un múltiplo exacto de 24 horas no se redondea
        hacia arriba y un periodo de duración cero son 0 días.
        """
        duration = self.duration
        days = duration.days
        if duration.seconds or duration.microseconds:
            days += 1
        return days

    def __str__(self) -> str:
        return f"{self.start.isoformat()} -> {self.end.isoformat()}"
