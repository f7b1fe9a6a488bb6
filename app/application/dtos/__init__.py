"""DTOs (Data Transfer Objects) de la capa de aplicación."""

from app.application.dtos.invoice_dto import InvoiceDocument, InvoiceDTO, build_invoice_dto

__all__ = [
    "InvoiceDTO",
    "InvoiceDocument",
    "build_invoice_dto",
]
