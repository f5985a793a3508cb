"""SQLAlchemy Analytics Repository Implementation

Aggregates stay dialect neutral: sums and counts run in SQL, calendar
grouping is left to the caller.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.analytics_repository import AnalyticsRepository
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from src.domain.product import Product


class SqlAlchemyAnalyticsRepository(AnalyticsRepository):
    """
    SQLAlchemy implementation of AnalyticsRepository
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def revenue_between(self, start: datetime, end: Optional[datetime] = None) -> Decimal:
        statement = select(func.coalesce(func.sum(Invoice.total), 0)).where(Invoice.date >= start)
        if end is not None:
            statement = statement.where(Invoice.date < end)

        result = await self.session.execute(statement)
        return Decimal(str(result.scalar_one()))

    async def invoice_totals_since(self, start: datetime) -> List[Tuple[datetime, Decimal]]:
        statement = select(Invoice.date, Invoice.total).where(Invoice.date >= start)
        result = await self.session.execute(statement)
        return [(row.date, row.total) for row in result.all()]

    async def count_customers(self, created_since: Optional[datetime] = None) -> int:
        statement = select(func.count()).select_from(Customer)
        if created_since is not None:
            statement = statement.where(Customer.created_at >= created_since)

        result = await self.session.execute(statement)
        return result.scalar_one()

    async def count_products(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Product))
        return result.scalar_one()

    async def product_sales_since(
        self, start: datetime, limit: int
    ) -> List[Tuple[int, str, int, Decimal]]:
        quantity_sold = func.sum(InvoiceItem.quantity).label("quantity_sold")
        revenue = func.sum(InvoiceItem.total).label("revenue")
        statement = (
            select(
                InvoiceItem.product_id,
                func.max(InvoiceItem.product_name).label("product_name"),
                quantity_sold,
                revenue,
            )
            .join(Invoice, Invoice.id == InvoiceItem.invoice_id)
            .where(Invoice.date >= start)
            .group_by(InvoiceItem.product_id)
            .order_by(quantity_sold.desc(), InvoiceItem.product_id)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return [
            (row.product_id, row.product_name, int(row.quantity_sold), Decimal(str(row.revenue)))
            for row in result.all()
        ]
