"""Value Object BookingNumber - identificador público de una renta."""

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class BookingNumber:
    """
    Value Object inmutable que representa el número de reserva de una renta.

    Es el handle externo de la renta, distinto del id de almacenamiento.
    Formato: UUID en forma canónica (ej: 3f2b8c1e-9a4d-4e0b-8f61-2c7d5e9a1b30).
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("booking_number no puede estar vacío")
        try:
            canonical = str(uuid.UUID(self.value))
        except (ValueError, AttributeError, TypeError) as exc:
            raise ValueError(f"booking_number no es un UUID válido: {self.value!r}") from exc
        object.__setattr__(self, "value", canonical)

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BookingNumber):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return False

    def __hash__(self) -> int:
        return hash(self.value)

    @classmethod
    def generate(cls) -> "BookingNumber":
        """Genera un nuevo número de reserva aleatorio (UUID v4)."""
        return cls(value=str(uuid.uuid4()))

    @classmethod
    def parse(cls, raw: str) -> "BookingNumber":
        """
        Crea un BookingNumber desde un string recibido del exterior.

        Raises:
            ValueError: Si el string no es un UUID.
        """
        if not isinstance(raw, str):
            raise ValueError(f"booking_number debe ser string: {type(raw).__name__}")
        return cls(value=raw.strip())
