"""UpdateInvoiceStatus Use Case

Changes the status label of a stored invoice.
"""

import logging
from typing import Optional
from src.app.repositories.entity_repository import InvoiceRepository
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_editor import set_status

logger = logging.getLogger(__name__)


class UpdateInvoiceStatus:
    """
    Use Case: Update invoice status

    Business Rules:
    1. Any status may follow any other (DRAFT, PENDING, PAID, OVERDUE)
    2. Unknown invoice ids and failed writes are reported as None
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: str, status: InvoiceStatus) -> Optional[Invoice]:
        invoice = await self.invoice_repo.get(invoice_id)

        if invoice is None:
            logger.warning(f"Cannot update status: invoice {invoice_id} not found")
            return None

        previous = invoice.status
        updated = await self.invoice_repo.save(set_status(invoice, status))
        if updated is None:
            logger.error(f"Failed to save status change for invoice {invoice_id}")
            return None
        logger.info(f"Invoice {invoice_id} status {previous.value} -> {updated.status.value}")

        return updated
