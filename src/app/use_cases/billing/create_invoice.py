"""CreateInvoice Use Case

Validates customer and product references, allocates the next sequential
invoice number for the current month and persists the invoice together with
its items as one atomic unit.
"""

import asyncio
import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Callable, List, Optional, Tuple
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.product_repository import ProductRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from src.domain.invoice_number import AllocationError, InvoiceNumberConflict
from .dtos import (
    CreateInvoiceCommandDTO,
    CreateInvoiceResponseDTO,
    CreatedInvoiceDTO,
    CreatedInvoiceItemDTO,
)

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
# Numeric(10, 2) money columns and INTEGER quantities
MAX_AMOUNT = Decimal("99999999.99")
MAX_QUANTITY = 2**31 - 1


def to_money(value) -> Decimal:
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def money_problem(value: Decimal) -> Optional[str]:
    """Describe why value cannot be stored as a money amount, None if it can"""
    if not value.is_finite():
        return "is not a number"
    if abs(value) > MAX_AMOUNT:
        return f"exceeds {MAX_AMOUNT}"
    if value != value.quantize(CENT):
        return "has more than 2 decimal places"
    return None


class CreateInvoice:
    """
    Use Case: Create an invoice with its line items

    Business Rules:
    1. Customer and every product must exist (INVALID_REFERENCE)
    2. At least one item, positive integer quantities, non-negative rates (INVALID_INVOICE)
       Rates have at most 2 decimal places and amounts fit Numeric(10, 2);
       nothing the client sends is rounded
    3. Line total = quantity * rate, invoice total = sum of line totals;
       client supplied totals that disagree are rejected (INVALID_INVOICE)
    4. Invoice number is SSS/MM/YY, sequential within the month
    5. Invoice and items are committed together or not at all

    Concurrency:
    - write_lock serialises allocation + insert + commit of every creation
      sharing it, so two callers never read the same highest serial
    - The unique index on invoice_number catches writers outside the lock
      (other processes); the attempt is rolled back and re-allocated up to
      max_retries times

    Flow:
    1. Validate customer, items and products (no writes)
    2. Acquire write lock
    3. Allocate invoice number
    4. Insert invoice, then each item in submitted order
    5. Commit (rollback on any failure)
    6. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        invoice_repo: InvoiceRepository,
        invoice_item_repo: InvoiceItemRepository,
        write_lock: asyncio.Lock,
        clock: Optional[Callable[[], datetime]] = None,
        max_retries: int = 1,
    ):
        self.uow = uow
        self.customer_repo = customer_repo
        self.product_repo = product_repo
        self.invoice_repo = invoice_repo
        self.invoice_item_repo = invoice_item_repo
        self.write_lock = write_lock
        self.clock = clock or datetime.now
        self.max_retries = max_retries

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[CreateInvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with customer_id, items and total

        Returns:
            Result[CreateInvoiceResponseDTO]: Success with invoice and items or error
        """
        try:
            # Step 1: Validate references and amounts before any write
            customer = await self.customer_repo.get_by_id(command.customer_id)
            if not customer:
                return Return.err(
                    Error(
                        code="INVALID_REFERENCE",
                        message=f"Customer {command.customer_id} does not exist",
                        reason="customer",
                    )
                )

            if not command.items:
                return Return.err(
                    Error(
                        code="INVALID_INVOICE",
                        message="Invoice must contain at least one item",
                        reason="empty-items",
                    )
                )

            requested_ids = {item.product_id for item in command.items}
            products = await self.product_repo.get_by_ids(requested_ids)
            product_names = {product.id: product.name for product in products}
            missing = sorted(requested_ids - product_names.keys())
            if missing:
                return Return.err(
                    Error(
                        code="INVALID_REFERENCE",
                        message=f"Unknown product id(s): {', '.join(str(i) for i in missing)}",
                        reason="product",
                    )
                )

            try:
                lines, error = self._price_lines(command, product_names)
            except InvalidOperation as e:
                error = Error(
                    code="INVALID_INVOICE",
                    message="Invoice amounts are not valid money values",
                    reason=f"invalid-amount: {e!r}",
                )
            if error:
                return Return.err(error)

            # Plain values only: a retry rolls back the session, which expires entities
            customer_snapshot = (customer.id, customer.name, customer.mobile, customer.address)
        except Exception as e:
            logger.exception("Invoice validation failed")
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="STORAGE_ERROR",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )

        invoice_total = sum((line.total for line in lines), Decimal("0.00"))

        # Step 2-5: Allocate, insert and commit under the write lock
        async with self.write_lock:
            attempt = 0
            while True:
                try:
                    invoice, created_items = await self._persist(
                        customer_snapshot, lines, invoice_total
                    )
                    await self.uow.commit()
                    break

                except InvoiceNumberConflict as e:
                    await self.uow.rollback()
                    if attempt >= self.max_retries:
                        logger.error(
                            f"Invoice number {e.invoice_number} still conflicting after "
                            f"{attempt} retries"
                        )
                        return Return.err(
                            Error(
                                code="STORAGE_ERROR",
                                message="Failed to create invoice, please retry",
                                reason=str(e),
                            )
                        )
                    attempt += 1
                    logger.warning(
                        f"Invoice number {e.invoice_number} taken by a concurrent writer, "
                        f"retrying ({attempt}/{self.max_retries})"
                    )

                except AllocationError as e:
                    await self.uow.rollback()
                    logger.error(f"Invoice number allocation failed: {e}")
                    return Return.err(
                        Error(
                            code="ALLOCATION_FAILED",
                            message="Failed to allocate invoice number",
                            reason=str(e),
                        )
                    )

                except Exception as e:
                    await self.uow.rollback()
                    logger.error(f"Invoice creation rolled back: {e}")
                    return Return.err(
                        Error(
                            code="STORAGE_ERROR",
                            message="Failed to create invoice",
                            reason=str(e),
                        )
                    )

        logger.info(
            f"Created invoice {invoice.invoice_number} for customer {invoice.customer_id} "
            f"with {len(created_items)} item(s), total {invoice.total}"
        )

        # Step 6: Build response
        response = CreateInvoiceResponseDTO(
            invoice=CreatedInvoiceDTO(
                id=invoice.id,
                invoice_number=invoice.invoice_number,
                date=invoice.date,
                total=invoice.total,
            ),
            items=[
                CreatedInvoiceItemDTO(
                    id=item.id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    rate=item.rate,
                    total=item.total,
                )
                for item in created_items
            ],
        )
        return Return.ok(response)

    def _price_lines(
        self, command: CreateInvoiceCommandDTO, product_names: dict
    ) -> Tuple[List[InvoiceItem], Optional[Error]]:
        """
        Build unsaved InvoiceItem rows with authoritative totals

        Rates are taken as sent, never rounded: a rate that does not fit
        the money columns is rejected instead.

        Returns:
            (items, None) when every line is valid, ([], Error) otherwise
        """
        lines = []
        for position, item in enumerate(command.items, start=1):
            if item.quantity <= 0 or item.quantity > MAX_QUANTITY:
                return [], Error(
                    code="INVALID_INVOICE",
                    message=f"Item {position}: quantity must be between 1 and {MAX_QUANTITY}",
                    reason="quantity-out-of-range",
                )

            problem = money_problem(item.rate)
            if problem:
                return [], Error(
                    code="INVALID_INVOICE",
                    message=f"Item {position}: rate {item.rate} {problem}",
                    reason="invalid-rate",
                )
            if item.rate < 0:
                return [], Error(
                    code="INVALID_INVOICE",
                    message=f"Item {position}: rate must not be negative",
                    reason="negative-rate",
                )

            rate = to_money(item.rate)
            line_total = to_money(rate * item.quantity)
            if line_total > MAX_AMOUNT:
                return [], Error(
                    code="INVALID_INVOICE",
                    message=f"Item {position}: total {line_total} exceeds {MAX_AMOUNT}",
                    reason="amount-out-of-range",
                )
            if item.total is not None and (
                not item.total.is_finite() or item.total != line_total
            ):
                return [], Error(
                    code="INVALID_INVOICE",
                    message=f"Item {position}: total {item.total} does not equal "
                            f"{item.quantity} x {rate} = {line_total}",
                    reason="item-total-mismatch",
                )

            lines.append(
                InvoiceItem(
                    product_id=item.product_id,
                    product_name=product_names[item.product_id],
                    quantity=item.quantity,
                    rate=rate,
                    total=line_total,
                )
            )

        invoice_total = sum((line.total for line in lines), Decimal("0.00"))
        if invoice_total > MAX_AMOUNT:
            return [], Error(
                code="INVALID_INVOICE",
                message=f"Invoice total {invoice_total} exceeds {MAX_AMOUNT}",
                reason="amount-out-of-range",
            )
        if command.total is not None and (
            not command.total.is_finite() or command.total != invoice_total
        ):
            return [], Error(
                code="INVALID_INVOICE",
                message=f"Invoice total {command.total} does not equal the sum of "
                        f"item totals {invoice_total}",
                reason="invoice-total-mismatch",
            )

        return lines, None

    async def _persist(
        self,
        customer_snapshot: tuple,
        lines: List[InvoiceItem],
        invoice_total: Decimal,
    ) -> Tuple[Invoice, List[InvoiceItem]]:
        """Allocate a number and insert the invoice with fresh item rows"""
        customer_id, name, mobile, address = customer_snapshot
        now = self.clock()

        invoice_number = await self.invoice_repo.generate_invoice_number(now)
        logger.debug(f"Allocated invoice number {invoice_number}")

        invoice = await self.invoice_repo.create(
            Invoice(
                invoice_number=invoice_number,
                date=now,
                total=invoice_total,
                customer_id=customer_id,
                customer_name=name,
                customer_mobile=mobile,
                customer_address=address,
            )
        )

        created_items = []
        for line in lines:
            created_items.append(
                await self.invoice_item_repo.create(
                    InvoiceItem(
                        invoice_id=invoice.id,
                        product_id=line.product_id,
                        product_name=line.product_name,
                        quantity=line.quantity,
                        rate=line.rate,
                        total=line.total,
                    )
                )
            )

        return invoice, created_items
