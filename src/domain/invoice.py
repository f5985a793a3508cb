"""Invoice Domain Entity

Sequentially numbered sale issued to a customer. Immutable once created.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Numeric, String, Text
from src.domain.base import BaseModel, IdType


class Invoice(BaseModel, table=True):
    """
    Invoice - Sale issued to a customer

    Domain Rules:
    - invoice_number is unique, formatted SSS/MM/YY
    - serials restart at 1 every calendar month
    - total is the sum of all invoice_items.total
    - customer_* fields are a snapshot taken when the invoice is created
    - Created only through the CreateInvoice use case, never updated or deleted
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_invoice_number', 'invoice_number', unique=True),
        Index('ix_invoices_date', 'date'),
        Index('ix_invoices_customer_id', 'customer_id'),
        CheckConstraint('total >= 0', name='invoice_total_non_negative'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique invoice identifier (auto-increment)"
    )

    invoice_number: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="Unique invoice number (e.g., 001/03/24)"
    )

    date: datetime = Field(
        sa_column=Column(DateTime, nullable=False),
        description="Invoice date, also decides the numbering scope"
    )

    total: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Invoice total (sum of item totals)"
    )

    customer_id: int = Field(
        sa_column=Column(IdType, ForeignKey("customers.id"), nullable=False),
        description="Foreign key to Customer"
    )

    customer_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Customer name at invoice time"
    )

    customer_mobile: str = Field(
        sa_column=Column(String(10), nullable=False),
        description="Customer mobile at invoice time"
    )

    customer_address: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Customer address at invoice time"
    )

    created_at: datetime = Field(
        default_factory=datetime.now,
        sa_column=Column(DateTime, nullable=False),
        description="Row creation timestamp"
    )
