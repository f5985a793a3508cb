"""Unit tests for GenerateReceipt use case"""

import base64
import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.billing.generate_receipt import GenerateReceipt
from src.domain.invoice import Invoice


@pytest.fixture
def sample_invoice():
    return Invoice(
        id=1,
        invoice_number="001/03/24",
        date=datetime(2024, 3, 15, 10, 30),
        total=Decimal("700.00"),
        customer_id=1,
        customer_name="Ravi Kumar",
        customer_mobile="9876543210",
        customer_address="12 Market Road",
    )


@pytest.fixture
def mock_invoice_repo():
    return MagicMock()


@pytest.fixture
def mock_invoice_item_repo():
    repo = MagicMock()
    repo.get_by_invoice_id = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def mock_receipt_service():
    service = MagicMock()
    service.generate_receipt = MagicMock(return_value=b"%PDF-1.4 receipt")
    return service


@pytest.fixture
def generate_receipt_use_case(mock_invoice_repo, mock_invoice_item_repo, mock_receipt_service):
    return GenerateReceipt(
        mock_invoice_repo,
        mock_invoice_item_repo,
        mock_receipt_service,
        shop_name="Sharma Auto Parts",
        shop_address="14 Station Road",
        shop_phone="9876500000",
        terms=["No returns"],
    )


@pytest.mark.asyncio
class TestGenerateReceipt:
    async def test_generate_receipt_success(
        self, generate_receipt_use_case, mock_invoice_repo, mock_receipt_service, sample_invoice
    ):
        """
        Given: An existing invoice
        When: GenerateReceipt is executed
        Then: The rendered PDF is returned base64 encoded with shop details passed through
        """
        # Arrange
        mock_invoice_repo.get_by_id = AsyncMock(return_value=sample_invoice)

        # Act
        result = await generate_receipt_use_case.execute(1)

        # Assert
        assert result.is_ok()
        assert result.value.invoice_number == "001/03/24"
        assert base64.b64decode(result.value.pdf_base64) == b"%PDF-1.4 receipt"

        kwargs = mock_receipt_service.generate_receipt.call_args.kwargs
        assert kwargs["invoice"] is sample_invoice
        assert kwargs["shop_name"] == "Sharma Auto Parts"
        assert kwargs["terms"] == ["No returns"]

    async def test_invoice_not_found(
        self, generate_receipt_use_case, mock_invoice_repo, mock_receipt_service
    ):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await generate_receipt_use_case.execute(123)

        assert result.is_err()
        assert result.error.code == "INVOICE_NOT_FOUND"
        mock_receipt_service.generate_receipt.assert_not_called()

    async def test_render_failure(
        self, generate_receipt_use_case, mock_invoice_repo, mock_receipt_service, sample_invoice
    ):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=sample_invoice)
        mock_receipt_service.generate_receipt.side_effect = ValueError("bad font")

        result = await generate_receipt_use_case.execute(1)

        assert result.is_err()
        assert result.error.code == "GENERATE_RECEIPT_FAILED"
