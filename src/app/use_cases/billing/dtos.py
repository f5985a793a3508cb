"""Data Transfer Objects for Billing Use Cases

Pydantic models for command inputs and response outputs.
Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InvoiceItemCommandDTO(CamelModel):
    """
    One requested line of a new invoice

    `total` is optional; when supplied it must equal quantity * rate.
    """

    product_id: int = Field(
        ...,
        alias="id",
        description="Product ID"
    )

    quantity: int = Field(
        ...,
        strict=True,
        description="Units sold (must be > 0)"
    )

    rate: Decimal = Field(
        ...,
        description="Unit price charged (must be >= 0)"
    )

    total: Optional[Decimal] = Field(
        default=None,
        description="Client computed line total"
    )


class CreateInvoiceCommandDTO(CamelModel):
    """
    Command DTO for creating an invoice

    Used as input to CreateInvoice use case.
    """

    customer_id: int = Field(
        ...,
        description="Customer ID"
    )

    total: Optional[Decimal] = Field(
        default=None,
        description="Client computed invoice total"
    )

    items: List[InvoiceItemCommandDTO] = Field(
        default_factory=list,
        description="Requested line items"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "customerId": 1,
                "total": "100.00",
                "items": [{"id": 1, "quantity": 2, "rate": "50.00", "total": "100.00"}]
            }
        }
    )


class CreatedInvoiceDTO(CamelModel):
    id: int
    invoice_number: str
    date: datetime
    total: Decimal


class CreatedInvoiceItemDTO(CamelModel):
    id: int
    product_id: int
    quantity: int
    rate: Decimal
    total: Decimal


class CreateInvoiceResponseDTO(CamelModel):
    """
    Response DTO for invoice creation

    Items are listed in the order they were submitted.
    """

    invoice: CreatedInvoiceDTO
    items: List[CreatedInvoiceItemDTO]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "invoice": {
                    "id": 7,
                    "invoiceNumber": "001/03/24",
                    "date": "2024-03-15T10:30:00",
                    "total": "100.00"
                },
                "items": [
                    {"id": 11, "productId": 1, "quantity": 2, "rate": "50.00", "total": "100.00"}
                ]
            }
        }
    )


class CustomerDetailsDTO(CamelModel):
    name: str
    mobile: str
    address: str


class InvoiceLineDTO(CamelModel):
    product_id: int
    name: str
    quantity: int
    rate: Decimal
    total: Decimal


class InvoiceDTO(CamelModel):
    """
    Invoice as shown in history and handed to the print layer
    """

    id: int
    invoice_number: str
    date: datetime
    total: Decimal
    customer_id: int
    customer_details: CustomerDetailsDTO
    items: List[InvoiceLineDTO]


class ReceiptResponseDTO(CamelModel):
    """
    Response DTO for receipt rendering
    """

    invoice_id: int
    invoice_number: str
    pdf_base64: str
    generated_at: datetime


class MonthlyRevenueDTO(CamelModel):
    month: str
    revenue: Decimal


class TopSellingProductDTO(CamelModel):
    product_id: int
    name: str
    total_sold: int
    total_revenue: Decimal


class ProductSalesDTO(CamelModel):
    name: str
    quantity: int


class AnalyticsResponseDTO(CamelModel):
    """
    Response DTO for the analytics dashboard
    """

    current_month_revenue: Decimal
    last_month_revenue: Decimal
    current_year_revenue: Decimal
    last_year_revenue: Decimal
    total_customers: int
    new_customers_this_month: int
    total_products: int
    monthly_revenue: List[MonthlyRevenueDTO]
    top_selling_products: List[TopSellingProductDTO]
    product_sales_data: List[ProductSalesDTO]
