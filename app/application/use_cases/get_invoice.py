import logging

from app.application.dtos.invoice_dto import InvoiceDocument, build_invoice_dto
from app.application.interfaces.clock import Clock
from app.application.interfaces.invoice_renderer import InvoiceRenderer
from app.application.interfaces.rental_repo import RentalRepo
from app.domain.errors import InvoiceNotReadyError, RentalNotFoundError
from app.domain.value_objects.booking_number import BookingNumber


class GetInvoiceUseCase:
    def __init__(
        self,
        rental_repo: RentalRepo,
        invoice_renderer: InvoiceRenderer,
        clock: Clock,
    ) -> None:
        self._rental_repo = rental_repo
        self._invoice_renderer = invoice_renderer
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, booking_number: str) -> InvoiceDocument:
        try:
            parsed = BookingNumber.parse(booking_number)
        except ValueError as exc:
            raise RentalNotFoundError(booking_number) from exc

        rental = await self._rental_repo.get_by_booking_number(parsed)
        if rental is None:
            raise RentalNotFoundError(str(parsed))
        if not rental.is_invoiceable:
            raise InvoiceNotReadyError(str(parsed), rental.status.value)

        invoice = build_invoice_dto(rental, issued_at=self._clock.now())
        content = self._invoice_renderer.render(invoice)
        self._logger.info(
            "Invoice generated",
            extra={"booking_number": invoice.booking_number, "size_bytes": len(content)},
        )
        return InvoiceDocument(content=content, filename=f"Invoice_{invoice.booking_number}.pdf")
