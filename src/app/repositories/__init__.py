from .product_repository import ProductRepository
from .customer_repository import CustomerRepository
from .invoice_repository import InvoiceRepository
from .invoice_item_repository import InvoiceItemRepository
from .analytics_repository import AnalyticsRepository

__all__ = [
    "ProductRepository",
    "CustomerRepository",
    "InvoiceRepository",
    "InvoiceItemRepository",
    "AnalyticsRepository",
]
