"""GetAnalytics Use Case

Revenue and catalogue figures for the dashboard.
"""

import calendar
from collections import OrderedDict
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional
from libs.result import Result, Return, Error
from src.app.repositories.analytics_repository import AnalyticsRepository
from .dtos import (
    AnalyticsResponseDTO,
    MonthlyRevenueDTO,
    ProductSalesDTO,
    TopSellingProductDTO,
)

TOP_SELLING_LIMIT = 5
PRODUCT_SALES_LIMIT = 10


def month_start(year: int, month: int) -> datetime:
    """First instant of a month, month may be 0 or negative (rolls back years)"""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return datetime(year, month, 1)


class GetAnalytics:
    """
    Use Case: Aggregate revenue analytics

    Periods are calendar based on the local clock:
    - current / last month, current / last year revenue
    - monthly revenue from the same month last year up to now
    - top sellers this year, product sales this month
    """

    def __init__(
        self,
        analytics_repo: AnalyticsRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.analytics_repo = analytics_repo
        self.clock = clock or datetime.now

    async def execute(self) -> Result[AnalyticsResponseDTO]:
        try:
            now = self.clock()
            current_month = month_start(now.year, now.month)
            last_month = month_start(now.year, now.month - 1)
            current_year = datetime(now.year, 1, 1)
            last_year = datetime(now.year - 1, 1, 1)
            trailing_start = datetime(now.year - 1, now.month, 1)

            repo = self.analytics_repo

            monthly = OrderedDict()
            for invoice_date, total in sorted(await repo.invoice_totals_since(trailing_start)):
                key = (invoice_date.year, invoice_date.month)
                monthly[key] = monthly.get(key, Decimal("0")) + Decimal(total)

            top_selling = await repo.product_sales_since(current_year, TOP_SELLING_LIMIT)
            month_sales = await repo.product_sales_since(current_month, PRODUCT_SALES_LIMIT)

            response = AnalyticsResponseDTO(
                current_month_revenue=await repo.revenue_between(current_month),
                last_month_revenue=await repo.revenue_between(last_month, current_month),
                current_year_revenue=await repo.revenue_between(current_year),
                last_year_revenue=await repo.revenue_between(last_year, current_year),
                total_customers=await repo.count_customers(),
                new_customers_this_month=await repo.count_customers(created_since=current_month),
                total_products=await repo.count_products(),
                monthly_revenue=[
                    MonthlyRevenueDTO(month=calendar.month_abbr[month], revenue=revenue)
                    for (_, month), revenue in monthly.items()
                ],
                top_selling_products=[
                    TopSellingProductDTO(
                        product_id=product_id,
                        name=name,
                        total_sold=quantity,
                        total_revenue=revenue,
                    )
                    for product_id, name, quantity, revenue in top_selling
                ],
                product_sales_data=[
                    ProductSalesDTO(name=name, quantity=quantity)
                    for _, name, quantity, _ in month_sales
                ],
            )
            return Return.ok(response)

        except Exception as e:
            return Return.err(
                Error(
                    code="ANALYTICS_FAILED",
                    message="Failed to compute analytics",
                    reason=str(e),
                )
            )
