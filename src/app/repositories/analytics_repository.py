"""Analytics Repository Interface

Read-only aggregate queries over invoice history.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple


class AnalyticsRepository(ABC):
    """
    Repository interface for revenue and catalogue analytics
    """

    @abstractmethod
    async def revenue_between(self, start: datetime, end: Optional[datetime] = None) -> Decimal:
        """
        Sum invoice totals dated in [start, end)

        Args:
            start: Inclusive lower bound
            end: Exclusive upper bound (None = unbounded)

        Returns:
            Revenue, zero when there are no invoices
        """
        pass

    @abstractmethod
    async def invoice_totals_since(self, start: datetime) -> List[Tuple[datetime, Decimal]]:
        """
        List (date, total) of every invoice dated on or after start

        Returns:
            List of (invoice date, invoice total)
        """
        pass

    @abstractmethod
    async def count_customers(self, created_since: Optional[datetime] = None) -> int:
        pass

    @abstractmethod
    async def count_products(self) -> int:
        pass

    @abstractmethod
    async def product_sales_since(
        self, start: datetime, limit: int
    ) -> List[Tuple[int, str, int, Decimal]]:
        """
        Best selling products on invoices dated on or after start

        Args:
            start: Inclusive lower bound on invoice date
            limit: Maximum number of rows

        Returns:
            List of (product_id, product_name, quantity_sold, revenue),
            ordered by quantity sold descending
        """
        pass
