"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, List
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Invoices are insert-only: there is no update or delete.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID

        Raises:
            InvoiceNumberConflict: invoice_number is already taken
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        """
        Retrieve invoice by invoice number

        Args:
            invoice_number: Unique invoice number

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Invoice]:
        """
        Retrieve all invoices, newest first

        Returns:
            List of invoices
        """
        pass

    @abstractmethod
    async def find_highest_invoice_number(self, suffix: str) -> Optional[str]:
        """
        Find the numerically highest invoice number ending with suffix

        Args:
            suffix: Scope suffix such as '/03/24'

        Returns:
            Invoice number string, or None if the scope is empty
        """
        pass

    @abstractmethod
    async def generate_invoice_number(self, moment: datetime) -> str:
        """
        Generate the next invoice number for the scope of moment

        Format: SSS/MM/YY (e.g., 001/03/24)

        Args:
            moment: Invoice date

        Returns:
            Next invoice number string

        Raises:
            AllocationError: the store could not be read or holds a malformed number
        """
        pass
