from .base import BaseModel
from .product import Product
from .customer import Customer
from .invoice import Invoice
from .invoice_item import InvoiceItem
from .invoice_number import AllocationError, InvoiceNumberConflict

__all__ = [
    "BaseModel",
    "Product",
    "Customer",
    "Invoice",
    "InvoiceItem",
    "AllocationError",
    "InvoiceNumberConflict",
]
