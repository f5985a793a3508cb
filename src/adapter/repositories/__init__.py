from .product_repository import SqlAlchemyProductRepository
from .customer_repository import SqlAlchemyCustomerRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_item_repository import SqlAlchemyInvoiceItemRepository
from .analytics_repository import SqlAlchemyAnalyticsRepository

__all__ = [
    "SqlAlchemyProductRepository",
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceItemRepository",
    "SqlAlchemyAnalyticsRepository",
]
