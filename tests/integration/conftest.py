import asyncio
from datetime import datetime
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.invoice_item_repository import SqlAlchemyInvoiceItemRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.product_repository import SqlAlchemyProductRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.billing.create_invoice import CreateInvoice
from src.depends import enable_sqlite_foreign_keys, get_session
from src.domain.customer import Customer
from src.domain.product import Product

MARCH_2024 = datetime(2024, 3, 15, 10, 30, 0)


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create test database engine on a throwaway SQLite file"""
    # A file (not :memory:) so that every connection sees the same database;
    # NullPool gives each concurrent session its own connection.
    test_db_url = f"sqlite+aiosqlite:///{tmp_path / 'billing_test.db'}"

    engine = create_async_engine(test_db_url, echo=False, future=True, poolclass=NullPool)
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Create a new database session for each test"""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded(db_session):
    """One customer and three products"""
    customer = Customer(name="Ravi Kumar", mobile="9876543210", address="12 Market Road")
    products = [
        Product(name="Engine Oil 1L", rate=Decimal("350.00")),
        Product(name="Air Filter", rate=Decimal("120.50")),
        Product(name="Spark Plug", rate=Decimal("95.00")),
    ]
    db_session.add(customer)
    db_session.add_all(products)
    await db_session.commit()
    return {"customer": customer, "products": products}


@pytest.fixture
def write_lock():
    return asyncio.Lock()


@pytest.fixture
def make_create_invoice(write_lock):
    """Build a CreateInvoice bound to one session with a fixed clock"""

    def _make(session, clock=lambda: MARCH_2024, invoice_item_repo=None, invoice_repo=None, lock=None):
        return CreateInvoice(
            SqlAlchemyUnitOfWork(session),
            SqlAlchemyCustomerRepository(session),
            SqlAlchemyProductRepository(session),
            invoice_repo or SqlAlchemyInvoiceRepository(session),
            invoice_item_repo or SqlAlchemyInvoiceItemRepository(session),
            write_lock=lock or write_lock,
            clock=clock,
            max_retries=1,
        )

    return _make


@pytest_asyncio.fixture
async def client(session_factory):
    """Create test client with database session override"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    # Each request gets its own session on the test database
    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session

    # Use ASGITransport for httpx AsyncClient
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
