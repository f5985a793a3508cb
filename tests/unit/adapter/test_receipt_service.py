"""Unit tests for ReportLabReceiptService"""

from datetime import datetime
from decimal import Decimal

from reportlab.lib.units import mm

from src.adapter.services.receipt_service import ReportLabReceiptService, PAPER_WIDTH
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem


def make_invoice():
    return Invoice(
        id=1,
        invoice_number="001/03/24",
        date=datetime(2024, 3, 15, 10, 30),
        total=Decimal("820.50"),
        customer_id=1,
        customer_name="Ravi Kumar",
        customer_mobile="9876543210",
        customer_address="12 Market Road",
    )


def make_items(count):
    return [
        InvoiceItem(
            id=i,
            invoice_id=1,
            product_id=i,
            product_name=f"Part number {i} with a fairly long description",
            quantity=1,
            rate=Decimal("10.00"),
            total=Decimal("10.00"),
        )
        for i in range(1, count + 1)
    ]


def page_count(pdf):
    return pdf.count(b"/Type /Page") - pdf.count(b"/Type /Pages")


class TestReportLabReceiptService:
    def test_renders_pdf(self):
        pdf = ReportLabReceiptService().generate_receipt(
            invoice=make_invoice(),
            invoice_items=make_items(2),
            shop_name="Sharma Auto Parts",
            shop_address="14 Station Road",
            shop_phone="9876500000",
            terms=["Goods once sold will not be taken back."],
        )

        assert pdf.startswith(b"%PDF")

    def test_page_is_80mm_wide(self):
        assert round(PAPER_WIDTH / mm) == 80

    def test_long_receipts_stay_on_one_page(self):
        """More items make a taller page rather than a second page"""
        service = ReportLabReceiptService()
        kwargs = dict(shop_name="Shop", shop_address="Addr", shop_phone="1")

        short_pdf = service.generate_receipt(make_invoice(), make_items(1), **kwargs)
        long_pdf = service.generate_receipt(make_invoice(), make_items(60), **kwargs)

        assert page_count(short_pdf) == 1
        assert page_count(long_pdf) == 1
        assert len(long_pdf) > len(short_pdf)
