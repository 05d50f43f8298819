"""Invoice persistence use cases

SaveInvoice, GetInvoice and DeleteInvoice.
"""

import logging
from typing import Optional
from src.app.repositories.entity_repository import InvoiceRepository
from src.domain.invoice import Invoice

logger = logging.getLogger(__name__)


class SaveInvoice:
    """
    Use Case: Save an edited invoice

    Business Rules:
    1. Derived item amounts and total are recomputed before persisting
    2. Unknown ids are inserted, known ids replaced in place
    3. A storage write failure is reported as None
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, invoice: Invoice) -> Optional[Invoice]:
        saved = await self.invoice_repo.save(invoice)
        if saved is None:
            logger.error(f"Failed to save invoice {invoice.invoice_number} ({invoice.id})")
            return None
        logger.info(f"Saved invoice {saved.invoice_number} ({saved.id}), total {saved.total_amount}")
        return saved


class GetInvoice:
    """Use Case: Load one invoice by id"""

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: str) -> Optional[Invoice]:
        return await self.invoice_repo.get(invoice_id)


class DeleteInvoice:
    """
    Use Case: Hard-delete an invoice

    There is no trash; the record is removed from the collection.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: str) -> bool:
        deleted = await self.invoice_repo.delete(invoice_id)
        if not deleted:
            logger.error(f"Failed to delete invoice {invoice_id}")
        return deleted
