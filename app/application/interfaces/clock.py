"""Interface Clock - Puerto de la hora usada para sellar rentas y facturas."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone

from app.domain.value_objects.rental_period import ensure_utc


class Clock(ABC):
    """Fuente de ``created_at``, ``updated_at`` y la fecha de emisión de facturas."""

    @abstractmethod
    def now(self) -> datetime:
        """Hora actual, siempre timezone-aware en UTC."""
        raise NotImplementedError


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FakeClock(Clock):
    """
    Reloj detenido para tests.

    Los valores naive se interpretan como UTC, igual que en el resto del
    dominio, de modo que los timestamps sellados se comparan sin ambigüedad.
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._now = ensure_utc(fixed_time)

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta) -> datetime:
        """Mueve el reloj hacia adelante y retorna la nueva hora."""
        if delta < timedelta(0):
            raise ValueError("FakeClock no puede retroceder")
        self._now = self._now + delta
        return self._now
