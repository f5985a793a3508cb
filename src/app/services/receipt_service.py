"""Receipt Rendering Service Interface

Defines the contract for rendering a created invoice as a printable receipt.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem


class ReceiptService(ABC):
    """
    Service interface for receipt rendering

    Renders a fixed-width thermal receipt for an invoice that already exists.
    """

    @abstractmethod
    def generate_receipt(
        self,
        invoice: Invoice,
        invoice_items: List[InvoiceItem],
        shop_name: str,
        shop_address: str,
        shop_phone: str,
        terms: Sequence[str] = (),
    ) -> bytes:
        """
        Generate a receipt PDF

        Args:
            invoice: Invoice entity with the customer snapshot
            invoice_items: Line items of the invoice
            shop_name: Shop name printed in the header
            shop_address: Shop address printed in the header
            shop_phone: Shop phone printed in the header
            terms: Terms and conditions lines

        Returns:
            PDF document as bytes
        """
        pass
