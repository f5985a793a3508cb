"""ListInvoices and GetInvoice Use Cases

Read invoice history with the customer snapshot and line items.
"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from .dtos import InvoiceDTO, CustomerDetailsDTO, InvoiceLineDTO


def to_invoice_dto(invoice: Invoice, items: List[InvoiceItem]) -> InvoiceDTO:
    return InvoiceDTO(
        id=invoice.id,
        invoice_number=invoice.invoice_number,
        date=invoice.date,
        total=invoice.total,
        customer_id=invoice.customer_id,
        customer_details=CustomerDetailsDTO(
            name=invoice.customer_name,
            mobile=invoice.customer_mobile,
            address=invoice.customer_address,
        ),
        items=[
            InvoiceLineDTO(
                product_id=item.product_id,
                name=item.product_name,
                quantity=item.quantity,
                rate=item.rate,
                total=item.total,
            )
            for item in items
        ],
    )


class ListInvoices:
    """
    Use Case: List all invoices, newest first
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_item_repo: InvoiceItemRepository,
    ):
        self.invoice_repo = invoice_repo
        self.invoice_item_repo = invoice_item_repo

    async def execute(self) -> Result[List[InvoiceDTO]]:
        try:
            invoices = await self.invoice_repo.list_all()
            items_by_invoice = await self.invoice_item_repo.get_by_invoice_ids(
                [invoice.id for invoice in invoices]
            )
            return Return.ok(
                [
                    to_invoice_dto(invoice, items_by_invoice.get(invoice.id, []))
                    for invoice in invoices
                ]
            )
        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_INVOICES_FAILED",
                    message="Failed to list invoices",
                    reason=str(e),
                )
            )


class GetInvoice:
    """
    Use Case: Fetch one invoice with its items
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_item_repo: InvoiceItemRepository,
    ):
        self.invoice_repo = invoice_repo
        self.invoice_item_repo = invoice_item_repo

    async def execute(self, invoice_id: int) -> Result[InvoiceDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            items = await self.invoice_item_repo.get_by_invoice_id(invoice_id)
            return Return.ok(to_invoice_dto(invoice, items))
        except Exception as e:
            return Return.err(
                Error(
                    code="GET_INVOICE_FAILED",
                    message="Failed to fetch invoice",
                    reason=str(e),
                )
            )
