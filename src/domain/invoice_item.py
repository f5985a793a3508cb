"""Invoice Item Domain Entity

Tracks individual line items within an invoice.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, Numeric, String
from src.domain.base import BaseModel, IdType


class InvoiceItem(BaseModel, table=True):
    """
    Invoice Item - Individual line item within an invoice

    Domain Rules:
    - Each item belongs to exactly one invoice
    - quantity is a positive integer
    - rate and product_name are snapshots of the product at time of sale
    - total = quantity * rate
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        Index('ix_invoice_items_invoice_id', 'invoice_id'),
        Index('ix_invoice_items_product_id', 'product_id'),
        CheckConstraint('quantity > 0', name='invoice_item_quantity_positive'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique invoice item identifier (auto-increment)"
    )

    invoice_id: int = Field(
        sa_column=Column(IdType, ForeignKey("invoices.id"), nullable=False),
        description="Foreign key to Invoice"
    )

    product_id: int = Field(
        sa_column=Column(IdType, ForeignKey("products.id"), nullable=False),
        description="Foreign key to Product"
    )

    product_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Product name at time of sale"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Units sold"
    )

    rate: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Unit price at time of sale"
    )

    total: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Line total (quantity * rate)"
    )

    created_at: datetime = Field(
        default_factory=datetime.now,
        sa_column=Column(DateTime, nullable=False),
        description="Row creation timestamp"
    )
