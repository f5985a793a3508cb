"""Invoice Item Repository Interface

Defines the contract for invoice item persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List
from src.domain.invoice_item import InvoiceItem


class InvoiceItemRepository(ABC):
    """
    Repository interface for InvoiceItem persistence
    """

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceItem]:
        """
        Retrieve all line items for an invoice

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceItem in insertion order
        """
        pass

    @abstractmethod
    async def get_by_invoice_ids(self, invoice_ids: Iterable[int]) -> Dict[int, List[InvoiceItem]]:
        """
        Retrieve line items for several invoices at once

        Args:
            invoice_ids: Invoice IDs

        Returns:
            Mapping of invoice ID to its items
        """
        pass

    @abstractmethod
    async def create(self, invoice_item: InvoiceItem) -> InvoiceItem:
        """
        Create a new invoice item

        Args:
            invoice_item: InvoiceItem entity to persist

        Returns:
            Created InvoiceItem with generated ID
        """
        pass
