"""
Invoice PDF rendering with ReportLab.

Layout: title header, invoice details and customer information side by side,
rental details table, total amount box, terms and a footer with the
generation timestamp.
"""

import logging
from datetime import datetime
from decimal import Decimal
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import HRFlowable, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.application.dtos.invoice_dto import InvoiceDTO

logger = logging.getLogger(__name__)

BRAND_COLOR = colors.HexColor("#1565C0")
MUTED_COLOR = colors.HexColor("#616161")
HEADER_FILL = colors.HexColor("#EEEEEE")
TOTAL_FILL = colors.HexColor("#BBDEFB")

TERMS = (
    "Payment is due upon return of the vehicle.",
    "Late returns may incur additional charges.",
    "Please inspect the vehicle before driving off.",
)


def _fmt_datetime(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value else "-"


def _fmt_km(value: int | None) -> str:
    return f"{value:,} km" if value is not None else "-"


def _fmt_money(value: Decimal | None) -> str:
    return f"{value:,.2f}" if value is not None else "-"


class ReportLabInvoiceRenderer:
    def __init__(self, company_name: str = "CAR RENTAL INVOICE", tagline: str = "Premium Car Rental Services"):
        self._company_name = company_name
        self._tagline = tagline
        styles = getSampleStyleSheet()
        self._title = ParagraphStyle(
            "InvoiceTitle", parent=styles["Title"], textColor=BRAND_COLOR, fontSize=24
        )
        self._subtitle = ParagraphStyle(
            "InvoiceSubtitle", parent=styles["Normal"], alignment=TA_CENTER, textColor=MUTED_COLOR
        )
        self._section = ParagraphStyle("InvoiceSection", parent=styles["Heading3"])
        self._body = styles["Normal"]
        self._small = ParagraphStyle(
            "InvoiceSmall", parent=styles["Normal"], fontSize=9, textColor=MUTED_COLOR
        )
        self._footer = ParagraphStyle(
            "InvoiceFooter", parent=styles["Italic"], alignment=TA_CENTER, fontSize=10
        )
        self._total = ParagraphStyle(
            "InvoiceTotal", parent=styles["Heading2"], alignment=TA_RIGHT, textColor=BRAND_COLOR
        )

    def render(self, invoice: InvoiceDTO) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=18 * mm,
            rightMargin=18 * mm,
            topMargin=18 * mm,
            bottomMargin=18 * mm,
            title=f"Invoice {invoice.booking_number}",
        )
        story = [
            *self._header(),
            *self._details(invoice),
            Spacer(1, 8 * mm),
            Paragraph("Rental Details", self._section),
            self._rental_table(invoice),
            Spacer(1, 8 * mm),
            self._total_box(invoice),
            Spacer(1, 10 * mm),
            *self._terms(),
            Spacer(1, 10 * mm),
            *self._footer_block(invoice),
        ]
        doc.build(story)
        content = buffer.getvalue()
        logger.debug(
            "Invoice PDF rendered",
            extra={"booking_number": invoice.booking_number, "size_bytes": len(content)},
        )
        return content

    def _header(self) -> list:
        return [
            Paragraph(self._company_name, self._title),
            Paragraph(self._tagline, self._subtitle),
            Spacer(1, 3 * mm),
            HRFlowable(width="100%", thickness=2, color=BRAND_COLOR),
            Spacer(1, 6 * mm),
        ]

    def _details(self, invoice: InvoiceDTO) -> list:
        left = [
            Paragraph("Invoice Details", self._section),
            Paragraph(f"<b>Booking Number:</b> {invoice.booking_number}", self._body),
            Paragraph(f"<b>Invoice Date:</b> {invoice.issued_at.strftime('%B %d, %Y')}", self._body),
            Paragraph(f"<b>Status:</b> {invoice.status}", self._body),
        ]
        right = [
            Paragraph("Customer Information", self._section),
            Paragraph(f"<b>Customer ID:</b> {escape(invoice.customer_id)}", self._body),
            Paragraph(f"<b>Email:</b> {escape(invoice.email_address)}", self._body),
        ]
        table = Table([[left, right]], colWidths=["55%", "45%"])
        table.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))
        return [table]

    def _rental_table(self, invoice: InvoiceDTO) -> Table:
        rows = [
            ["Field", "Value"],
            ["Registration Number", invoice.registration_number],
            ["Category", invoice.category],
            ["Pickup Date/Time", _fmt_datetime(invoice.pickup_datetime)],
            ["Pickup Meter Reading", _fmt_km(invoice.pickup_meter_reading)],
        ]
        if invoice.return_datetime is not None:
            rows.append(["Return Date/Time", _fmt_datetime(invoice.return_datetime)])
        if invoice.return_meter_reading is not None:
            rows.append(["Return Meter Reading", _fmt_km(invoice.return_meter_reading)])
        if invoice.number_of_days is not None:
            rows.append(["Number of Days", str(invoice.number_of_days)])
        if invoice.number_of_km is not None:
            rows.append(["Distance Traveled", _fmt_km(invoice.number_of_km)])

        table = Table(rows, colWidths=["40%", "60%"])
        table.setStyle(
            TableStyle(
                [
                    ("GRID", (0, 0), (-1, -1), 0.75, colors.black),
                    ("BACKGROUND", (0, 0), (-1, 0), HEADER_FILL),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                ]
            )
        )
        return table

    def _total_box(self, invoice: InvoiceDTO) -> Table:
        box = Table(
            [[Paragraph(f"Total Amount: {_fmt_money(invoice.calculated_price)}", self._total)]],
            colWidths=["100%"],
        )
        box.setStyle(
            TableStyle(
                [
                    ("BOX", (0, 0), (-1, -1), 2, BRAND_COLOR),
                    ("BACKGROUND", (0, 0), (-1, -1), TOTAL_FILL),
                    ("TOPPADDING", (0, 0), (-1, -1), 10),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 10),
                ]
            )
        )
        return box

    def _terms(self) -> list:
        return [
            Paragraph("Terms &amp; Conditions", self._section),
            *[Paragraph(f"&bull; {line}", self._small) for line in TERMS],
        ]

    def _footer_block(self, invoice: InvoiceDTO) -> list:
        return [
            HRFlowable(width="100%", thickness=1, color=colors.lightgrey),
            Spacer(1, 2 * mm),
            Paragraph("Thank you for choosing our car rental service!", self._footer),
            Paragraph(
                f"Generated on: {invoice.issued_at.strftime('%Y-%m-%d %H:%M:%S')}", self._small
            ),
        ]
