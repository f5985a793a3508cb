"""ReportLab Receipt Service Implementation

Renders invoices on 80 mm thermal paper using ReportLab.
"""

from io import BytesIO
from typing import List, Sequence
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.receipt_service import ReceiptService
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem

PAPER_WIDTH = 80 * mm
MARGIN = 4 * mm
CONTENT_WIDTH = PAPER_WIDTH - 2 * MARGIN
COLUMN_WIDTHS = [30 * mm, 8 * mm, 14 * mm, 20 * mm]


class ReportLabReceiptService(ReceiptService):
    """
    ReportLab implementation of ReceiptService

    Thermal rolls have no fixed page length, so the page height is measured
    from the rendered content before the document is built.
    """

    def generate_receipt(
        self,
        invoice: Invoice,
        invoice_items: List[InvoiceItem],
        shop_name: str,
        shop_address: str,
        shop_phone: str,
        terms: Sequence[str] = (),
    ) -> bytes:
        """
        Generate a receipt PDF

        Args:
            invoice: Invoice entity with the customer snapshot
            invoice_items: Line items of the invoice
            shop_name: Shop name printed in the header
            shop_address: Shop address printed in the header
            shop_phone: Shop phone printed in the header
            terms: Terms and conditions lines

        Returns:
            PDF document as bytes
        """
        styles = getSampleStyleSheet()

        shop_style = ParagraphStyle(
            "ShopStyle",
            parent=styles["Heading2"],
            fontSize=13,
            alignment=1,
            spaceAfter=2,
        )
        centered_style = ParagraphStyle(
            "CenteredStyle",
            parent=styles["Normal"],
            fontSize=8,
            alignment=1,
        )
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=8,
            leading=10,
        )
        small_style = ParagraphStyle(
            "SmallStyle",
            parent=styles["Normal"],
            fontSize=7,
            leading=9,
            textColor=colors.HexColor("#555555"),
        )

        elements = []

        # Header - shop details
        elements.append(Paragraph(escape(shop_name), shop_style))
        elements.append(Paragraph(escape(shop_address), centered_style))
        elements.append(Paragraph(f"Ph: {shop_phone}", centered_style))
        elements.append(Spacer(1, 3 * mm))

        # Invoice and customer details
        elements.append(Paragraph(f"Invoice No: {invoice.invoice_number}", normal_style))
        elements.append(Paragraph(f"Date: {invoice.date.strftime('%d/%m/%Y %H:%M')}", normal_style))
        elements.append(Paragraph(f"Customer: {escape(invoice.customer_name)}", normal_style))
        elements.append(Paragraph(f"Mobile: {invoice.customer_mobile}", normal_style))
        elements.append(Paragraph(f"Address: {escape(invoice.customer_address)}", normal_style))
        elements.append(Spacer(1, 3 * mm))

        # Items
        item_data = [["Item", "Qty", "Rate", "Total"]]
        for item in invoice_items:
            item_data.append(
                [
                    Paragraph(escape(item.product_name), normal_style),
                    str(item.quantity),
                    f"{item.rate:,.2f}",
                    f"{item.total:,.2f}",
                ]
            )
        item_data.append(["", "", "Total", f"{invoice.total:,.2f}"])

        item_table = Table(item_data, colWidths=COLUMN_WIDTHS)
        item_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 8),
                    ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("LINEBELOW", (0, 0), (-1, 0), 0.5, colors.black),
                    ("LINEABOVE", (0, -1), (-1, -1), 0.5, colors.black),
                    ("FONTNAME", (2, -1), (-1, -1), "Helvetica-Bold"),
                    ("LEFTPADDING", (0, 0), (-1, -1), 1),
                    ("RIGHTPADDING", (0, 0), (-1, -1), 1),
                    ("TOPPADDING", (0, 0), (-1, -1), 2),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 2),
                ]
            )
        )
        elements.append(item_table)
        elements.append(Spacer(1, 4 * mm))

        # Terms and footer
        if terms:
            elements.append(Paragraph("Terms &amp; Conditions", normal_style))
            for line in terms:
                elements.append(Paragraph(f"- {escape(line)}", small_style))
            elements.append(Spacer(1, 3 * mm))
        elements.append(Paragraph("Thank you for your business!", centered_style))

        page_height = self._measure(elements) + 2 * MARGIN

        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=(PAPER_WIDTH, page_height),
            rightMargin=MARGIN,
            leftMargin=MARGIN,
            topMargin=MARGIN,
            bottomMargin=MARGIN,
            title=f"Invoice {invoice.invoice_number}",
        )
        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes

    @staticmethod
    def _measure(elements) -> float:
        height = 0.0
        for element in elements:
            _, element_height = element.wrap(CONTENT_WIDTH, 10000 * mm)
            height += element_height + element.getSpaceBefore() + element.getSpaceAfter()
        # Frame padding (6pt per side) plus slack for rounding
        return height + 12 + 10 * mm
