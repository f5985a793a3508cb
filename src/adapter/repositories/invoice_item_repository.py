"""SQLAlchemy Invoice Item Repository Implementation

Implements invoice item persistence using SQLAlchemy async session.
"""

from typing import Dict, Iterable, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice_item import InvoiceItem


class SqlAlchemyInvoiceItemRepository(InvoiceItemRepository):
    """
    SQLAlchemy implementation of InvoiceItemRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceItem]:
        """
        Retrieve all line items for an invoice

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceItem in insertion order
        """
        statement = (
            select(InvoiceItem)
            .where(InvoiceItem.invoice_id == invoice_id)
            .order_by(InvoiceItem.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_invoice_ids(self, invoice_ids: Iterable[int]) -> Dict[int, List[InvoiceItem]]:
        invoice_ids = list(invoice_ids)
        if not invoice_ids:
            return {}

        statement = (
            select(InvoiceItem)
            .where(InvoiceItem.invoice_id.in_(invoice_ids))
            .order_by(InvoiceItem.invoice_id, InvoiceItem.id)
        )
        result = await self.session.execute(statement)

        grouped: Dict[int, List[InvoiceItem]] = {}
        for item in result.scalars().all():
            grouped.setdefault(item.invoice_id, []).append(item)
        return grouped

    async def create(self, invoice_item: InvoiceItem) -> InvoiceItem:
        """
        Create a new invoice item

        Args:
            invoice_item: InvoiceItem entity to persist

        Returns:
            Created InvoiceItem with generated ID
        """
        self.session.add(invoice_item)
        await self.session.flush()
        await self.session.refresh(invoice_item)
        return invoice_item
