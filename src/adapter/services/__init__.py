from .unit_of_work import SqlAlchemyUnitOfWork
from .receipt_service import ReportLabReceiptService

__all__ = [
    "SqlAlchemyUnitOfWork",
    "ReportLabReceiptService",
]
