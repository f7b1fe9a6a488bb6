"""Generación de documentos PDF."""

from app.infrastructure.pdf.reportlab_invoice_renderer import ReportLabInvoiceRenderer

__all__ = ["ReportLabInvoiceRenderer"]
