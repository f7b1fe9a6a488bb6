"""Interface BookingNumberGenerator - Puerto para generar números de reserva."""

import uuid
from abc import ABC, abstractmethod

from app.domain.value_objects.booking_number import BookingNumber


class BookingNumberGenerator(ABC):
    """
    Puerto para generación de números de reserva únicos.

    Permite inyectar implementaciones fake para testing determinista.
    """

    @abstractmethod
    def generate(self) -> BookingNumber:
        raise NotImplementedError


class RandomBookingNumberGenerator(BookingNumberGenerator):
    """Implementación real basada en UUID v4."""

    def generate(self) -> BookingNumber:
        return BookingNumber.generate()


class FakeBookingNumberGenerator(BookingNumberGenerator):
    """
    Implementación fake para testing.

    Genera UUIDs predecibles basados en un contador, o retorna el siguiente
    valor configurado con ``set_next``.
    """

    def __init__(self) -> None:
        self._counter = 0
        self._next: list[BookingNumber] = []

    def generate(self) -> BookingNumber:
        if self._next:
            return self._next.pop(0)
        self._counter += 1
        return BookingNumber(value=str(uuid.UUID(int=self._counter)))

    def set_next(self, booking_number: str) -> None:
        """
        Configura el próximo número a retornar.

        Args:
            booking_number: UUID específico a retornar en la próxima llamada.
        """
        self._next.append(BookingNumber(value=booking_number))

    def reset(self) -> None:
        self._counter = 0
        self._next.clear()
