"""Excepciones de dominio para el servicio de rentas."""


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Tipos de error (determinan la clase de respuesta externa) ===


class ValidationError(DomainError):
    """Entrada mal formada o precondición de la transición violada."""

    def __init__(self, message: str, field: str | None = None, code: str = "VALIDATION_ERROR"):
        super().__init__(message=message, code=code)
        self.field = field


class NotFoundError(DomainError):
    """El recurso solicitado no existe."""


class ConflictError(DomainError):
    """Solicitud válida pero incompatible con el estado actual del recurso."""


class ConfigurationError(DomainError):
    """Falla interna de despliegue/configuración, no un error del usuario."""


# === Errores de Renta ===


class RentalNotFoundError(NotFoundError):
    """La renta no existe."""

    def __init__(self, booking_number: str):
        super().__init__(
            message=f"Rental with booking number '{booking_number}' not found",
            code="RENTAL_NOT_FOUND",
        )
        self.booking_number = booking_number


class RentalAlreadyCompletedError(ConflictError):
    """La renta ya fue devuelta; la transición a Completed ocurre una sola vez."""

    def __init__(self, booking_number: str):
        super().__init__(
            message=f"Rental with booking number '{booking_number}' is already completed",
            code="RENTAL_ALREADY_COMPLETED",
        )
        self.booking_number = booking_number


class BookingNumberAlreadyExistsError(ConflictError):
    """Ya existe una renta con ese número de reserva."""

    def __init__(self, booking_number: str):
        super().__init__(
            message=f"A rental with booking number '{booking_number}' already exists",
            code="BOOKING_NUMBER_ALREADY_EXISTS",
        )
        self.booking_number = booking_number


# === Errores de Factura ===


class InvoiceNotReadyError(ConflictError):
    """La factura no está disponible mientras la renta siga activa."""

    def __init__(self, booking_number: str, current_status: str):
        super().__init__(
            message=f"Invoice not available for '{booking_number}': current status '{current_status}'",
            code="INVOICE_NOT_READY",
        )
        self.booking_number = booking_number
        self.current_status = current_status


# === Errores de Precios ===


class PriceCalculatorNotFoundError(ConfigurationError):
    """No hay calculadora registrada para la categoría."""

    def __init__(self, category: str):
        super().__init__(
            message=f"no calculator for category {category}",
            code="PRICE_CALCULATOR_NOT_FOUND",
        )
        self.category = category
