"""Integration tests for product, customer and analytics endpoints"""

import pytest
from decimal import Decimal
from httpx import AsyncClient


class TestProductsAPIIntegration:
    @pytest.mark.asyncio
    async def test_product_crud(self, client: AsyncClient):
        # Create
        created = await client.post("/api/products", json={"name": "Brake Pad", "rate": "480.00"})
        assert created.status_code == 200
        product = created.json()
        assert set(product) == {"id", "name", "rate", "createdAt", "updatedAt"}

        # Update
        updated = await client.put(f"/api/products/{product['id']}", json={"rate": 500})
        assert updated.status_code == 200
        assert updated.json()["name"] == "Brake Pad"
        assert Decimal(updated.json()["rate"]) == Decimal("500")

        # List
        listing = await client.get("/api/products")
        assert [p["name"] for p in listing.json()] == ["Brake Pad"]

        # Delete
        deleted = await client.delete(f"/api/products/{product['id']}")
        assert deleted.json() == {"id": product["id"], "success": True}
        assert (await client.get("/api/products")).json() == []

    @pytest.mark.asyncio
    async def test_duplicate_product_name(self, client: AsyncClient, seeded):
        response = await client.post("/api/products", json={"name": "Air Filter", "rate": 1})

        assert response.status_code == 409
        assert response.json()["code"] == "PRODUCT_NAME_EXISTS"

    @pytest.mark.asyncio
    async def test_negative_rate_rejected(self, client: AsyncClient):
        response = await client.post("/api/products", json={"name": "Free Gift", "rate": -1})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_product_on_invoice_cannot_be_deleted(self, client: AsyncClient, seeded):
        # Arrange
        product = seeded["products"][1]
        await client.post(
            "/api/invoices",
            json={
                "customerId": seeded["customer"].id,
                "items": [{"id": product.id, "quantity": 1, "rate": str(product.rate)}],
            },
        )

        # Act
        response = await client.delete(f"/api/products/{product.id}")

        # Assert
        assert response.status_code == 409
        assert response.json()["code"] == "PRODUCT_IN_USE"

    @pytest.mark.asyncio
    async def test_update_missing_product(self, client: AsyncClient):
        response = await client.put("/api/products/777", json={"name": "Ghost"})

        assert response.status_code == 404
        assert response.json()["code"] == "PRODUCT_NOT_FOUND"


class TestCustomersAPIIntegration:
    @pytest.mark.asyncio
    async def test_customer_crud(self, client: AsyncClient):
        created = await client.post(
            "/api/customers",
            json={"name": "Asha", "mobile": "9123456780", "address": "Lane 4"},
        )
        assert created.status_code == 200
        customer = created.json()

        updated = await client.put(f"/api/customers/{customer['id']}", json={"address": "Lane 5"})
        assert updated.json()["address"] == "Lane 5"
        assert updated.json()["mobile"] == "9123456780"

        deleted = await client.delete(f"/api/customers/{customer['id']}")
        assert deleted.status_code == 200
        assert (await client.get("/api/customers")).json() == []

    @pytest.mark.asyncio
    async def test_invalid_mobile(self, client: AsyncClient):
        response = await client.post(
            "/api/customers",
            json={"name": "Asha", "mobile": "12345", "address": "Lane 4"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_duplicate_mobile(self, client: AsyncClient, seeded):
        response = await client.post(
            "/api/customers",
            json={"name": "Someone Else", "mobile": "9876543210", "address": "Elsewhere"},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "CUSTOMER_MOBILE_EXISTS"

    @pytest.mark.asyncio
    async def test_customer_edit_does_not_rewrite_invoice(self, client: AsyncClient, seeded):
        """Invoices keep the customer details captured at creation"""
        # Arrange
        customer = seeded["customer"]
        product = seeded["products"][0]
        created = await client.post(
            "/api/invoices",
            json={
                "customerId": customer.id,
                "items": [{"id": product.id, "quantity": 1, "rate": str(product.rate)}],
            },
        )
        invoice_id = created.json()["invoice"]["id"]

        # Act
        await client.put(f"/api/customers/{customer.id}", json={"address": "New Address"})
        deleted = await client.delete(f"/api/customers/{customer.id}")
        invoice = (await client.get(f"/api/invoices/{invoice_id}")).json()

        # Assert
        assert invoice["customerDetails"]["address"] == "12 Market Road"
        assert deleted.status_code == 409
        assert deleted.json()["code"] == "CUSTOMER_HAS_INVOICES"


class TestAnalyticsAPIIntegration:
    @pytest.mark.asyncio
    async def test_analytics(self, client: AsyncClient, seeded):
        # Arrange
        product = seeded["products"][0]
        await client.post(
            "/api/invoices",
            json={
                "customerId": seeded["customer"].id,
                "items": [{"id": product.id, "quantity": 3, "rate": str(product.rate)}],
            },
        )

        # Act
        response = await client.get("/api/analytics")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["currentMonthRevenue"]) == Decimal("1050.00")
        assert Decimal(data["currentYearRevenue"]) == Decimal("1050.00")
        assert data["totalCustomers"] == 1
        assert data["newCustomersThisMonth"] == 1
        assert data["totalProducts"] == 3
        assert data["topSellingProducts"][0]["name"] == "Engine Oil 1L"
        assert data["topSellingProducts"][0]["totalSold"] == 3
        assert data["productSalesData"] == [{"name": "Engine Oil 1L", "quantity": 3}]
        assert Decimal(data["monthlyRevenue"][-1]["revenue"]) == Decimal("1050.00")

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
