import asyncio
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.domain.customer import Customer
from src.domain.product import Product


@pytest.fixture
def mock_uow():
    """Mock unit of work: commit and rollback are awaitable"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 15, 10, 30, 0)


@pytest.fixture
def write_lock():
    return asyncio.Lock()


@pytest.fixture
def sample_customer():
    return Customer(
        id=1,
        name="Ravi Kumar",
        mobile="9876543210",
        address="12 Market Road",
        created_at=datetime(2024, 1, 5),
        updated_at=datetime(2024, 1, 5),
    )


@pytest.fixture
def sample_products():
    return [
        Product(
            id=1,
            name="Engine Oil 1L",
            rate=Decimal("350.00"),
            created_at=datetime(2024, 1, 1),
            updated_at=datetime(2024, 1, 1),
        ),
        Product(
            id=2,
            name="Air Filter",
            rate=Decimal("120.50"),
            created_at=datetime(2024, 1, 1),
            updated_at=datetime(2024, 1, 1),
        ),
    ]
