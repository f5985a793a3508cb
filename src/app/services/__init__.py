from .unit_of_work import UnitOfWork
from .receipt_service import ReceiptService

__all__ = [
    "UnitOfWork",
    "ReceiptService",
]
