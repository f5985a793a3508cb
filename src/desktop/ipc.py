"""In-process request/response bridge for the desktop shell

The desktop front end calls named channels instead of HTTP routes. Each call
opens its own session, runs the same use case the web routes run and hands
back plain JSON-ready data (camelCase keys), or raises IpcError.
"""

import asyncio
import logging
from datetime import datetime
from typing import Any, Awaitable, Callable, Dict, Optional

from pydantic import BaseModel, ValidationError

from libs.result import Result
from src.adapter.repositories.analytics_repository import SqlAlchemyAnalyticsRepository
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.invoice_item_repository import SqlAlchemyInvoiceItemRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.product_repository import SqlAlchemyProductRepository
from src.adapter.services.receipt_service import ReportLabReceiptService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.schemas.invoice_request import CreateInvoiceRequestSchema
from src.app.use_cases.billing.create_invoice import CreateInvoice
from src.app.use_cases.billing.generate_receipt import GenerateReceipt
from src.app.use_cases.billing.get_analytics import GetAnalytics
from src.app.use_cases.billing.list_invoices import ListInvoices
from src.app.use_cases.catalog.customers import (
    AddCustomer,
    DeleteCustomer,
    ListCustomers,
    UpdateCustomer,
)
from src.app.use_cases.catalog.dtos import (
    AddCustomerCommandDTO,
    AddProductCommandDTO,
    UpdateCustomerCommandDTO,
    UpdateProductCommandDTO,
)
from src.app.use_cases.catalog.products import (
    AddProduct,
    DeleteProduct,
    ListProducts,
    UpdateProduct,
)

logger = logging.getLogger(__name__)


class IpcError(Exception):
    """Failure returned to the desktop front end"""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.message, "code": self.code}


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [_dump(v) for v in value]
    return value


def _unwrap(result: Result) -> Any:
    if result.is_err():
        raise IpcError(result.error.code, result.error.message)
    return _dump(result.value)


def _record_id(payload: Any) -> int:
    """Accept either a bare id or {"id": ...}"""
    raw = payload.get("id") if isinstance(payload, dict) else payload
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise IpcError("VALIDATION_ERROR", f"Invalid id: {raw!r}")


def _update_payload(payload: Any):
    """Updates arrive as {"id": ..., "data": {...}}"""
    if not isinstance(payload, dict):
        raise IpcError("VALIDATION_ERROR", "Expected an object with id and data")
    return _record_id(payload), payload.get("data") or {}


class IpcBridge:
    """
    Channel dispatcher for the desktop binding

    Args:
        session_factory: callable returning an AsyncSession context manager
        config: ApplicationConfig-like object (retries, shop details)
        clock: optional clock for invoice dates and analytics periods
    """

    def __init__(self, session_factory, config, clock: Optional[Callable[[], datetime]] = None):
        self.session_factory = session_factory
        self.config = config
        self.clock = clock
        self.invoice_write_lock = asyncio.Lock()
        self._handlers: Dict[str, Callable[[Any, Any], Awaitable[Any]]] = {
            "product:getAll": self._get_products,
            "product:add": self._add_product,
            "product:update": self._update_product,
            "product:delete": self._delete_product,
            "customer:getAll": self._get_customers,
            "customer:add": self._add_customer,
            "customer:update": self._update_customer,
            "customer:delete": self._delete_customer,
            "invoice:getAll": self._get_invoices,
            "invoice:create": self._create_invoice,
            "analytics:get": self._get_analytics,
            "printInvoice": self._print_invoice,
        }

    @property
    def channels(self):
        return sorted(self._handlers)

    async def invoke(self, channel: str, payload: Any = None) -> Any:
        """
        Run one request on a channel

        Raises:
            IpcError: unknown channel, malformed payload or a failed use case
        """
        handler = self._handlers.get(channel)
        if handler is None:
            raise IpcError("UNKNOWN_CHANNEL", f"No handler for channel '{channel}'")

        async with self.session_factory() as session:
            try:
                return await handler(session, payload)
            except ValidationError as e:
                first = e.errors()[0] if e.errors() else {}
                raise IpcError("VALIDATION_ERROR", first.get("msg", "Invalid request"))
            except IpcError as e:
                logger.info(f"{channel} failed: {e.code}")
                raise

    # Products

    async def _get_products(self, session, payload):
        return _unwrap(await ListProducts(SqlAlchemyProductRepository(session)).execute())

    async def _add_product(self, session, payload):
        command = AddProductCommandDTO.model_validate(payload or {})
        use_case = AddProduct(SqlAlchemyUnitOfWork(session), SqlAlchemyProductRepository(session))
        return _unwrap(await use_case.execute(command))

    async def _update_product(self, session, payload):
        product_id, data = _update_payload(payload)
        command = UpdateProductCommandDTO.model_validate(data)
        use_case = UpdateProduct(SqlAlchemyUnitOfWork(session), SqlAlchemyProductRepository(session))
        return _unwrap(await use_case.execute(product_id, command))

    async def _delete_product(self, session, payload):
        use_case = DeleteProduct(SqlAlchemyUnitOfWork(session), SqlAlchemyProductRepository(session))
        return _unwrap(await use_case.execute(_record_id(payload)))

    # Customers

    async def _get_customers(self, session, payload):
        return _unwrap(await ListCustomers(SqlAlchemyCustomerRepository(session)).execute())

    async def _add_customer(self, session, payload):
        command = AddCustomerCommandDTO.model_validate(payload or {})
        use_case = AddCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
        return _unwrap(await use_case.execute(command))

    async def _update_customer(self, session, payload):
        customer_id, data = _update_payload(payload)
        command = UpdateCustomerCommandDTO.model_validate(data)
        use_case = UpdateCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
        return _unwrap(await use_case.execute(customer_id, command))

    async def _delete_customer(self, session, payload):
        use_case = DeleteCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
        return _unwrap(await use_case.execute(_record_id(payload)))

    # Invoices

    async def _get_invoices(self, session, payload):
        use_case = ListInvoices(
            SqlAlchemyInvoiceRepository(session),
            SqlAlchemyInvoiceItemRepository(session),
        )
        return _unwrap(await use_case.execute())

    async def _create_invoice(self, session, payload):
        request = CreateInvoiceRequestSchema.model_validate(payload or {})
        use_case = CreateInvoice(
            SqlAlchemyUnitOfWork(session),
            SqlAlchemyCustomerRepository(session),
            SqlAlchemyProductRepository(session),
            SqlAlchemyInvoiceRepository(session),
            SqlAlchemyInvoiceItemRepository(session),
            write_lock=self.invoice_write_lock,
            clock=self.clock,
            max_retries=self.config.INVOICE_NUMBER_MAX_RETRIES,
        )
        return _unwrap(await use_case.execute(request.to_command()))

    async def _get_analytics(self, session, payload):
        use_case = GetAnalytics(SqlAlchemyAnalyticsRepository(session), clock=self.clock)
        return _unwrap(await use_case.execute())

    async def _print_invoice(self, session, payload):
        use_case = GenerateReceipt(
            SqlAlchemyInvoiceRepository(session),
            SqlAlchemyInvoiceItemRepository(session),
            ReportLabReceiptService(),
            shop_name=self.config.SHOP_NAME,
            shop_address=self.config.SHOP_ADDRESS,
            shop_phone=self.config.SHOP_PHONE,
            terms=self.config.RECEIPT_TERMS,
        )
        return _unwrap(await use_case.execute(_record_id(payload)))
