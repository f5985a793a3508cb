"""Billing domain use cases"""
from .create_invoice import CreateInvoice
from .list_invoices import ListInvoices, GetInvoice
from .generate_receipt import GenerateReceipt
from .get_analytics import GetAnalytics
from .dtos import (
    CreateInvoiceCommandDTO,
    InvoiceItemCommandDTO,
    CreateInvoiceResponseDTO,
    CreatedInvoiceDTO,
    CreatedInvoiceItemDTO,
    InvoiceDTO,
    InvoiceLineDTO,
    CustomerDetailsDTO,
    ReceiptResponseDTO,
    AnalyticsResponseDTO,
)

__all__ = [
    "CreateInvoice",
    "ListInvoices",
    "GetInvoice",
    "GenerateReceipt",
    "GetAnalytics",
    "CreateInvoiceCommandDTO",
    "InvoiceItemCommandDTO",
    "CreateInvoiceResponseDTO",
    "CreatedInvoiceDTO",
    "CreatedInvoiceItemDTO",
    "InvoiceDTO",
    "InvoiceLineDTO",
    "CustomerDetailsDTO",
    "ReceiptResponseDTO",
    "AnalyticsResponseDTO",
]
