"""Integration tests for the desktop IPC bridge"""

import asyncio
import base64
import pytest
from datetime import datetime

from config import ApplicationConfig
from src.desktop import IpcBridge, IpcError


@pytest.fixture
def bridge(session_factory):
    return IpcBridge(session_factory, ApplicationConfig, clock=lambda: datetime(2024, 3, 15, 10, 30))


@pytest.mark.asyncio
class TestIpcBridge:
    async def test_full_billing_flow(self, bridge):
        """
        Given: An empty store
        When: A product and customer are added and an invoice is created through channels
        Then: The invoice shows up in history and can be printed
        """
        # Arrange
        product = await bridge.invoke("product:add", {"name": "Engine Oil 1L", "rate": 350})
        customer = await bridge.invoke(
            "customer:add", {"name": "Ravi Kumar", "mobile": "9876543210", "address": "12 Market Road"}
        )

        # Act
        created = await bridge.invoke(
            "invoice:create",
            {
                "customerId": customer["id"],
                "total": 700,
                "items": [{"id": product["id"], "quantity": 2, "rate": 350, "total": 700}],
            },
        )

        # Assert
        assert created["invoice"]["invoiceNumber"] == "001/03/24"
        assert created["items"][0]["quantity"] == 2

        history = await bridge.invoke("invoice:getAll")
        assert [invoice["invoiceNumber"] for invoice in history] == ["001/03/24"]
        assert history[0]["customerDetails"]["name"] == "Ravi Kumar"

        receipt = await bridge.invoke("printInvoice", {"id": created["invoice"]["id"]})
        assert base64.b64decode(receipt["pdfBase64"]).startswith(b"%PDF")

    async def test_update_and_delete_channels(self, bridge):
        product = await bridge.invoke("product:add", {"name": "Air Filter", "rate": "120.50"})

        updated = await bridge.invoke("product:update", {"id": product["id"], "data": {"rate": 125}})
        deleted = await bridge.invoke("product:delete", product["id"])

        assert updated["name"] == "Air Filter"
        assert deleted == {"id": product["id"], "success": True}
        assert await bridge.invoke("product:getAll") == []

    async def test_failed_use_case_raises_ipc_error(self, bridge):
        with pytest.raises(IpcError) as exc_info:
            await bridge.invoke("invoice:create", {"customerId": 1, "items": []})

        assert exc_info.value.code == "INVALID_REFERENCE"
        assert exc_info.value.to_dict()["error"] == exc_info.value.message

    async def test_malformed_payload(self, bridge):
        with pytest.raises(IpcError) as exc_info:
            await bridge.invoke("customer:add", {"name": "Asha", "mobile": "123"})

        assert exc_info.value.code == "VALIDATION_ERROR"

    async def test_boolean_quantity_is_rejected(self, bridge):
        with pytest.raises(IpcError) as exc_info:
            await bridge.invoke(
                "invoice:create",
                {"customerId": 1, "items": [{"id": 1, "quantity": True, "rate": "10.00"}]},
            )

        assert exc_info.value.code == "VALIDATION_ERROR"

    async def test_unknown_channel(self, bridge):
        with pytest.raises(IpcError) as exc_info:
            await bridge.invoke("invoice:delete", 1)

        assert exc_info.value.code == "UNKNOWN_CHANNEL"

    async def test_concurrent_calls_share_one_sequence(self, bridge):
        # Arrange
        product = await bridge.invoke("product:add", {"name": "Spark Plug", "rate": 95})
        customer = await bridge.invoke(
            "customer:add", {"name": "Asha", "mobile": "9123456780", "address": "Lane 4"}
        )
        payload = {
            "customerId": customer["id"],
            "items": [{"id": product["id"], "quantity": 1, "rate": 95}],
        }

        # Act
        results = await asyncio.gather(*(bridge.invoke("invoice:create", payload) for _ in range(10)))

        # Assert
        numbers = sorted(result["invoice"]["invoiceNumber"] for result in results)
        assert numbers == [f"{serial:03d}/03/24" for serial in range(1, 11)]

    async def test_analytics_channel(self, bridge):
        analytics = await bridge.invoke("analytics:get")

        assert analytics["totalProducts"] == 0
        assert analytics["monthlyRevenue"] == []
