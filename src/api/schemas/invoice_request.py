"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests.
Amount rules (positive quantity, matching totals) are checked by the use case
so they surface as INVALID_INVOICE rather than VALIDATION_ERROR.
"""

from decimal import Decimal
from typing import List, Optional
from pydantic import ConfigDict, Field
from src.app.use_cases.billing.dtos import (
    CamelModel,
    CreateInvoiceCommandDTO,
    InvoiceItemCommandDTO,
)


class InvoiceItemRequestSchema(CamelModel):
    id: int = Field(..., description="Product ID")
    quantity: int = Field(..., strict=True, description="Units sold (JSON integer, booleans rejected)")
    rate: Decimal = Field(..., description="Unit price charged")
    total: Optional[Decimal] = Field(default=None, description="Line total (quantity * rate)")


class CreateInvoiceRequestSchema(CamelModel):
    """
    Request schema for creating an invoice

    Used for POST /api/invoices endpoint.
    """

    customer_id: int = Field(..., description="Customer ID (required)")
    total: Optional[Decimal] = Field(default=None, description="Invoice total")
    items: List[InvoiceItemRequestSchema] = Field(
        default_factory=list,
        description="Line items, at least one"
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

    def to_command(self) -> CreateInvoiceCommandDTO:
        return CreateInvoiceCommandDTO(
            customer_id=self.customer_id,
            total=self.total,
            items=[
                InvoiceItemCommandDTO(
                    product_id=item.id,
                    quantity=item.quantity,
                    rate=item.rate,
                    total=item.total,
                )
                for item in self.items
            ],
        )
