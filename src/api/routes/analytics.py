"""Analytics API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.billing.dtos import AnalyticsResponseDTO
from src.app.use_cases.billing.get_analytics import GetAnalytics
from src.adapter.repositories.analytics_repository import SqlAlchemyAnalyticsRepository
from src.depends import get_session
from src.api.error import client_error

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("", response_model=AnalyticsResponseDTO, status_code=status.HTTP_200_OK)
async def get_analytics(session: AsyncSession = Depends(get_session)):
    """
    Dashboard figures: revenue by month and year, customer and product
    counts, best sellers this year and product sales this month.
    """
    result = await GetAnalytics(SqlAlchemyAnalyticsRepository(session)).execute()

    if result.is_err():
        raise client_error(result.error)

    return result.value
