"""GenerateReceipt Use Case

Renders an existing invoice as an 80 mm thermal receipt PDF.
"""

import base64
from datetime import datetime
from typing import Sequence
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.services.receipt_service import ReceiptService
from .dtos import ReceiptResponseDTO


class GenerateReceipt:
    """
    Use Case: Generate receipt PDF for an invoice

    Business Rules:
    1. Invoice must exist
    2. Receipt shows the customer snapshot stored on the invoice
    3. Returns PDF as base64-encoded string

    Flow:
    1. Retrieve invoice by ID
    2. Retrieve invoice items
    3. Render PDF using receipt service
    4. Return response with PDF as base64
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_item_repo: InvoiceItemRepository,
        receipt_service: ReceiptService,
        shop_name: str,
        shop_address: str,
        shop_phone: str,
        terms: Sequence[str] = (),
    ):
        self.invoice_repo = invoice_repo
        self.invoice_item_repo = invoice_item_repo
        self.receipt_service = receipt_service
        self.shop_name = shop_name
        self.shop_address = shop_address
        self.shop_phone = shop_phone
        self.terms = terms

    async def execute(self, invoice_id: int) -> Result[ReceiptResponseDTO]:
        """
        Execute receipt generation

        Args:
            invoice_id: Invoice ID to render

        Returns:
            Result[ReceiptResponseDTO]: Success with PDF or error
        """
        try:
            # Step 1: Retrieve invoice
            invoice = await self.invoice_repo.get_by_id(invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            # Step 2: Retrieve items
            invoice_items = await self.invoice_item_repo.get_by_invoice_id(invoice_id)

            # Step 3: Render PDF
            pdf_bytes = self.receipt_service.generate_receipt(
                invoice=invoice,
                invoice_items=invoice_items,
                shop_name=self.shop_name,
                shop_address=self.shop_address,
                shop_phone=self.shop_phone,
                terms=self.terms,
            )

            # Step 4: Build response
            return Return.ok(
                ReceiptResponseDTO(
                    invoice_id=invoice.id,
                    invoice_number=invoice.invoice_number,
                    pdf_base64=base64.b64encode(pdf_bytes).decode("utf-8"),
                    generated_at=datetime.now(),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="GENERATE_RECEIPT_FAILED",
                    message="Failed to generate receipt",
                    reason=str(e),
                )
            )
