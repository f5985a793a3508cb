"""Data Transfer Objects for Catalogue Use Cases

Products and customers, camelCase on the wire.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import ConfigDict, Field, field_validator
from src.app.use_cases.billing.dtos import CamelModel

MOBILE_PATTERN = r"^\d{10}$"


def _strip_required(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


class AddProductCommandDTO(CamelModel):
    name: str = Field(..., max_length=255, description="Unique product name")
    rate: Decimal = Field(..., ge=0, description="Unit price (must be >= 0)")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _strip_required(v)

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Engine Oil 1L", "rate": "350.00"}}
    )


class UpdateProductCommandDTO(CamelModel):
    """Partial update: omitted fields keep their value"""

    name: Optional[str] = Field(default=None, max_length=255)
    rate: Optional[Decimal] = Field(default=None, ge=0)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _strip_required(v)


class ProductDTO(CamelModel):
    id: int
    name: str
    rate: Decimal
    created_at: datetime
    updated_at: datetime


class AddCustomerCommandDTO(CamelModel):
    name: str = Field(..., max_length=255, description="Customer name")
    mobile: str = Field(..., pattern=MOBILE_PATTERN, description="Exactly 10 digits, unique")
    address: str = Field(..., description="Postal address")

    @field_validator("name", "address")
    @classmethod
    def validate_text(cls, v):
        """Ensure name and address are not blank"""
        return _strip_required(v)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Ravi Kumar", "mobile": "9876543210", "address": "12 Market Road"}
        }
    )


class UpdateCustomerCommandDTO(CamelModel):
    """Partial update: omitted fields keep their value"""

    name: Optional[str] = Field(default=None, max_length=255)
    mobile: Optional[str] = Field(default=None, pattern=MOBILE_PATTERN)
    address: Optional[str] = None

    @field_validator("name", "address")
    @classmethod
    def validate_text(cls, v):
        """Ensure name and address are not blank"""
        return _strip_required(v)


class CustomerDTO(CamelModel):
    id: int
    name: str
    mobile: str
    address: str
    created_at: datetime
    updated_at: datetime


class DeletedDTO(CamelModel):
    id: int
    success: bool
