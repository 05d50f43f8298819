"""ListInvoices Use Case

Lists invoices with optional search text and status filter.
"""

from typing import List, Optional
from src.app.repositories.entity_repository import InvoiceRepository
from src.domain.invoice import Invoice
from .dtos import ListInvoicesQueryDTO


class ListInvoices:
    """
    Use Case: List invoices

    Business Rules:
    1. Search matches invoice number or client name, case-insensitive
    2. Status filter is exact
    3. Stored order is kept
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, query: Optional[ListInvoicesQueryDTO] = None) -> List[Invoice]:
        query = query or ListInvoicesQueryDTO()
        needle = query.search.strip().lower()

        invoices = await self.invoice_repo.list_all()

        return [
            invoice
            for invoice in invoices
            if (
                not needle
                or needle in invoice.invoice_number.lower()
                or needle in invoice.client_name.lower()
            )
            and (query.status is None or invoice.status == query.status)
        ]
