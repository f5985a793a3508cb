"""Invoice numbering

Invoice numbers have the form SSS/MM/YY: a zero padded serial followed by
the month and two digit year of the invoice date. Serials restart at 1 in
every (month, year) scope and may grow past three digits.
"""

from datetime import datetime
from typing import Optional


class AllocationError(Exception):
    """Next invoice number could not be determined"""


class InvoiceNumberConflict(Exception):
    """Allocated invoice number was already taken by a concurrent writer"""

    def __init__(self, invoice_number: str):
        super().__init__(f"Invoice number {invoice_number} already exists")
        self.invoice_number = invoice_number


def scope_suffix(moment: datetime) -> str:
    """Return the scope suffix for a moment, e.g. '/03/24'"""
    return f"/{moment.month:02d}/{moment.year % 100:02d}"


def parse_serial(invoice_number: str) -> int:
    """
    Extract the serial from an invoice number

    Raises:
        AllocationError: if the leading component is not a positive integer
    """
    head = invoice_number.split("/", 1)[0]
    if not head.isdigit() or int(head) < 1:
        raise AllocationError(f"Malformed invoice number: {invoice_number!r}")
    return int(head)


def format_invoice_number(serial: int, moment: datetime) -> str:
    return f"{serial:03d}{scope_suffix(moment)}"


def next_invoice_number(highest: Optional[str], moment: datetime) -> str:
    """
    Compute the invoice number that follows `highest` in the scope of `moment`

    Args:
        highest: Highest existing invoice number in the scope, or None
        moment: Invoice date

    Returns:
        Next invoice number string
    """
    serial = parse_serial(highest) + 1 if highest else 1
    return format_invoice_number(serial, moment)
