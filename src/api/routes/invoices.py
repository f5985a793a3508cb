"""Invoice API Routes

FastAPI routes for invoice creation, history and receipts.
"""

import asyncio
import base64
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.invoice_request import CreateInvoiceRequestSchema
from src.app.use_cases.billing.dtos import (
    CreateInvoiceResponseDTO,
    InvoiceDTO,
    ReceiptResponseDTO,
)
from src.app.use_cases.billing.create_invoice import CreateInvoice
from src.app.use_cases.billing.list_invoices import ListInvoices, GetInvoice
from src.app.use_cases.billing.generate_receipt import GenerateReceipt
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.product_repository import SqlAlchemyProductRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.invoice_item_repository import SqlAlchemyInvoiceItemRepository
from src.adapter.services.receipt_service import ReportLabReceiptService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_invoice_write_lock
from src.api.error import client_error

router = APIRouter(prefix="/invoices", tags=["Invoices"])

INVOICE_NOT_FOUND_RESPONSE = {
    "description": "Invoice not found",
    "content": {
        "application/json": {
            "example": {"error": "Invoice with ID 123 not found", "code": "INVOICE_NOT_FOUND"}
        }
    }
}


def build_receipt_use_case(session: AsyncSession) -> GenerateReceipt:
    return GenerateReceipt(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
        ReportLabReceiptService(),
        shop_name=ApplicationConfig.SHOP_NAME,
        shop_address=ApplicationConfig.SHOP_ADDRESS,
        shop_phone=ApplicationConfig.SHOP_PHONE,
        terms=ApplicationConfig.RECEIPT_TERMS,
    )


@router.get(
    "",
    response_model=List[InvoiceDTO],
    status_code=status.HTTP_200_OK,
)
async def list_invoices(session: AsyncSession = Depends(get_session)):
    """
    List invoice history, newest first.

    Each invoice carries the customer details captured when it was created
    and its items in the order they were entered.
    """
    use_case = ListInvoices(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute()

    if result.is_err():
        raise client_error(result.error)

    return result.value


@router.post(
    "",
    response_model=CreateInvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        400: {
            "description": "Unknown customer/product or inconsistent amounts",
            "content": {
                "application/json": {
                    "example": {"error": "Unknown product id(s): 99", "code": "INVALID_REFERENCE"}
                }
            }
        },
        500: {
            "description": "Invoice number allocation or storage failure",
            "content": {
                "application/json": {
                    "example": {"error": "Failed to allocate invoice number", "code": "ALLOCATION_FAILED"}
                }
            }
        }
    }
)
async def create_invoice(
    request: CreateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session),
    write_lock: asyncio.Lock = Depends(get_invoice_write_lock),
):
    """
    Create an invoice with its items in one atomic step.

    The invoice number (SSS/MM/YY) is allocated from the invoices already
    issued this month. Either the invoice and all of its items are stored,
    or nothing is.

    **Example request:**
    ```json
    {
      "customerId": 1,
      "total": 100,
      "items": [{"id": 1, "quantity": 2, "rate": 50, "total": 100}]
    }
    ```

    **Returns:**
    - 200: Invoice created
    - 400: Missing fields, unknown references or inconsistent amounts
    - 500: Number allocation or storage failure
    """
    # Create UnitOfWork and repositories
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateInvoice(
        uow,
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyProductRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
        write_lock=write_lock,
        max_retries=ApplicationConfig.INVOICE_NUMBER_MAX_RETRIES,
    )

    # Execute use case
    result = await use_case.execute(request.to_command())

    # Handle errors
    if result.is_err():
        raise client_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceDTO,
    status_code=status.HTTP_200_OK,
    responses={404: INVOICE_NOT_FOUND_RESPONSE},
)
async def get_invoice(invoice_id: int, session: AsyncSession = Depends(get_session)):
    use_case = GetInvoice(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise client_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}/receipt",
    response_model=ReceiptResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: INVOICE_NOT_FOUND_RESPONSE},
)
async def get_invoice_receipt(invoice_id: int, session: AsyncSession = Depends(get_session)):
    """
    Render the 80 mm thermal receipt for an invoice.

    **Returns:**
    - 200: Receipt PDF as base64
    - 404: Invoice not found
    """
    result = await build_receipt_use_case(session).execute(invoice_id)

    if result.is_err():
        raise client_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}/receipt/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        404: INVOICE_NOT_FOUND_RESPONSE,
    }
)
async def download_invoice_receipt_pdf(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Download the receipt as a PDF file for printing.
    """
    result = await build_receipt_use_case(session).execute(invoice_id)

    if result.is_err():
        raise client_error(result.error)

    # Decode PDF from base64 and return as binary response
    pdf_bytes = base64.b64decode(result.value.pdf_base64)
    filename = result.value.invoice_number.replace("/", "-")

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"inline; filename=invoice_{filename}.pdf"
        }
    )
