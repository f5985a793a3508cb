"""Product Domain Entity

Catalogue item that can be sold on an invoice.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, DateTime, Numeric, String
from src.domain.base import BaseModel, IdType


class Product(BaseModel, table=True):
    """
    Product - Sellable catalogue item

    Domain Rules:
    - name is unique and non-empty
    - rate (unit price) is non-negative
    - Invoice items keep their own copy of name and rate, so editing a
      product never changes historical invoices
    - A product referenced by an invoice item cannot be deleted
    """

    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint('rate >= 0', name='product_rate_non_negative'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique product identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True, index=True),
        description="Product name (unique)"
    )

    rate: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Unit price"
    )

    created_at: datetime = Field(
        default_factory=datetime.now,
        sa_column=Column(DateTime, nullable=False),
        description="Product creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.now,
        sa_column=Column(DateTime, nullable=False),
        description="Last update timestamp"
    )
