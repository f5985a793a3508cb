"""Customer Domain Entity"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, String, Text
from src.domain.base import BaseModel, IdType


class Customer(BaseModel, table=True):
    """
    Customer - Buyer that invoices are issued to

    Domain Rules:
    - mobile is unique and exactly 10 digits
    - name and address are non-empty
    - A customer that owns invoices cannot be deleted
    """

    __tablename__ = "customers"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique customer identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False, index=True),
        description="Customer name"
    )

    mobile: str = Field(
        sa_column=Column(String(10), nullable=False, unique=True, index=True),
        description="10 digit mobile number (unique)"
    )

    address: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Postal address"
    )

    created_at: datetime = Field(
        default_factory=datetime.now,
        sa_column=Column(DateTime, nullable=False),
        description="Customer creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.now,
        sa_column=Column(DateTime, nullable=False),
        description="Last update timestamp"
    )
