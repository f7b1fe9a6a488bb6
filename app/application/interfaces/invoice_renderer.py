"""Interface InvoiceRenderer - Puerto para generar documentos de factura."""

from typing import Protocol

from app.application.dtos.invoice_dto import InvoiceDTO


class InvoiceRenderer(Protocol):
    def render(self, invoice: InvoiceDTO) -> bytes:
        """Genera el documento (PDF) de una renta completada."""
        ...
