"""Unit tests for product catalogue use cases"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from pydantic import ValidationError

from src.app.use_cases.catalog.dtos import AddProductCommandDTO, UpdateProductCommandDTO
from src.app.use_cases.catalog.products import (
    AddProduct,
    DeleteProduct,
    ListProducts,
    UpdateProduct,
)


@pytest.fixture
def mock_product_repo():
    repo = MagicMock()
    repo.get_by_name = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=lambda product: _with_id(product, 3))
    repo.update = AsyncMock(side_effect=lambda product: product)
    repo.delete = AsyncMock()
    repo.is_referenced = AsyncMock(return_value=False)
    return repo


def _with_id(product, product_id):
    product.id = product_id
    return product


class TestProductCommands:
    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            AddProductCommandDTO(name="   ", rate=Decimal("1"))

    def test_negative_rate_rejected(self):
        with pytest.raises(ValidationError):
            AddProductCommandDTO(name="Spark Plug", rate=Decimal("-0.01"))

    def test_name_is_trimmed(self):
        assert AddProductCommandDTO(name="  Spark Plug ", rate=0).name == "Spark Plug"


@pytest.mark.asyncio
class TestListProducts:
    async def test_list_products(self, mock_product_repo, sample_products):
        mock_product_repo.list_all = AsyncMock(return_value=sample_products)

        result = await ListProducts(mock_product_repo).execute()

        assert result.is_ok()
        assert [p.name for p in result.value] == ["Engine Oil 1L", "Air Filter"]


@pytest.mark.asyncio
class TestAddProduct:
    async def test_add_product(self, mock_uow, mock_product_repo):
        # Arrange
        command = AddProductCommandDTO(name="Spark Plug", rate=Decimal("95.00"))

        # Act
        result = await AddProduct(mock_uow, mock_product_repo).execute(command)

        # Assert
        assert result.is_ok()
        assert result.value.id == 3
        assert result.value.rate == Decimal("95.00")
        mock_uow.commit.assert_awaited_once()

    async def test_duplicate_name(self, mock_uow, mock_product_repo, sample_products):
        # Arrange
        mock_product_repo.get_by_name = AsyncMock(return_value=sample_products[0])
        command = AddProductCommandDTO(name="Engine Oil 1L", rate=Decimal("1"))

        # Act
        result = await AddProduct(mock_uow, mock_product_repo).execute(command)

        # Assert
        assert result.is_err()
        assert result.error.code == "PRODUCT_NAME_EXISTS"
        mock_product_repo.create.assert_not_awaited()


@pytest.mark.asyncio
class TestUpdateProduct:
    async def test_partial_update_keeps_name(self, mock_uow, mock_product_repo, sample_products):
        # Arrange
        mock_product_repo.get_by_id = AsyncMock(return_value=sample_products[0])

        # Act
        result = await UpdateProduct(mock_uow, mock_product_repo).execute(
            1, UpdateProductCommandDTO(rate=Decimal("375.00"))
        )

        # Assert
        assert result.is_ok()
        assert result.value.name == "Engine Oil 1L"
        assert result.value.rate == Decimal("375.00")
        mock_product_repo.get_by_name.assert_not_awaited()

    async def test_rename_to_existing_name(self, mock_uow, mock_product_repo, sample_products):
        mock_product_repo.get_by_id = AsyncMock(return_value=sample_products[0])
        mock_product_repo.get_by_name = AsyncMock(return_value=sample_products[1])

        result = await UpdateProduct(mock_uow, mock_product_repo).execute(
            1, UpdateProductCommandDTO(name="Air Filter")
        )

        assert result.is_err()
        assert result.error.code == "PRODUCT_NAME_EXISTS"
        mock_uow.commit.assert_not_awaited()

    async def test_not_found(self, mock_uow, mock_product_repo):
        mock_product_repo.get_by_id = AsyncMock(return_value=None)

        result = await UpdateProduct(mock_uow, mock_product_repo).execute(
            42, UpdateProductCommandDTO(rate=Decimal("1"))
        )

        assert result.is_err()
        assert result.error.code == "PRODUCT_NOT_FOUND"


@pytest.mark.asyncio
class TestDeleteProduct:
    async def test_delete_product(self, mock_uow, mock_product_repo, sample_products):
        mock_product_repo.get_by_id = AsyncMock(return_value=sample_products[1])

        result = await DeleteProduct(mock_uow, mock_product_repo).execute(2)

        assert result.is_ok()
        assert result.value.success is True
        mock_product_repo.delete.assert_awaited_once_with(sample_products[1])
        mock_uow.commit.assert_awaited_once()

    async def test_product_on_invoice_cannot_be_deleted(
        self, mock_uow, mock_product_repo, sample_products
    ):
        """
        Given: A product that appears on an invoice
        When: DeleteProduct is executed
        Then: PRODUCT_IN_USE and the product is kept
        """
        # Arrange
        mock_product_repo.get_by_id = AsyncMock(return_value=sample_products[0])
        mock_product_repo.is_referenced = AsyncMock(return_value=True)

        # Act
        result = await DeleteProduct(mock_uow, mock_product_repo).execute(1)

        # Assert
        assert result.is_err()
        assert result.error.code == "PRODUCT_IN_USE"
        mock_product_repo.delete.assert_not_awaited()
