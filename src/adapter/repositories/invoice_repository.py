"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

import logging
from datetime import datetime
from typing import Optional, List
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice
from src.domain.invoice_number import (
    AllocationError,
    InvoiceNumberConflict,
    next_invoice_number,
    scope_suffix,
)

logger = logging.getLogger(__name__)


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID

        Raises:
            InvoiceNumberConflict: unique index on invoice_number was violated
        """
        self.session.add(invoice)
        try:
            await self.session.flush()
        except IntegrityError as e:
            if "invoice_number" in str(e.orig):
                raise InvoiceNumberConflict(invoice.invoice_number) from e
            raise
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        """
        Retrieve invoice by invoice number

        Args:
            invoice_number: Unique invoice number

        Returns:
            Invoice if found, None otherwise
        """
        statement = select(Invoice).where(Invoice.invoice_number == invoice_number)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Invoice]:
        statement = select(Invoice).order_by(Invoice.date.desc(), Invoice.id.desc())
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def find_highest_invoice_number(self, suffix: str) -> Optional[str]:
        """
        Find the numerically highest invoice number ending with suffix

        Serials are zero padded to three digits but may grow wider, so a
        longer number always carries a larger serial.

        Args:
            suffix: Scope suffix such as '/03/24'

        Returns:
            Invoice number string, or None if the scope is empty
        """
        statement = (
            select(Invoice.invoice_number)
            .where(Invoice.invoice_number.like(f"%{suffix}"))
            .order_by(
                func.length(Invoice.invoice_number).desc(),
                Invoice.invoice_number.desc(),
            )
            .limit(1)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def generate_invoice_number(self, moment: datetime) -> str:
        """
        Generate the next invoice number for the scope of moment

        Format: SSS/MM/YY (e.g., 001/03/24)

        Args:
            moment: Invoice date

        Returns:
            Next invoice number string

        Raises:
            AllocationError: store unreachable or highest number malformed
        """
        suffix = scope_suffix(moment)
        try:
            highest = await self.find_highest_invoice_number(suffix)
        except SQLAlchemyError as e:
            raise AllocationError(f"Could not read invoice numbers for scope {suffix}: {e}") from e

        return next_invoice_number(highest, moment)
