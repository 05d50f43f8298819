"""CreateInvoice Use Case

Creates a draft invoice with generated id and number.
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
from src.app.rendering.formatting import to_iso_timestamp
from src.app.repositories.entity_repository import ClientRepository, InvoiceRepository
from src.domain.base import generate_uuid
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_editor import select_client
from src.domain.template import TemplateVariant
from .dtos import CreateInvoiceCommandDTO

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create draft invoice

    Business Rules:
    1. Invoice is created with status=DRAFT and a fresh id
    2. Invoice number is sequential over existing numbers (INV-0001, INV-0002, ...)
       unless given explicitly; numbers are not enforced unique
    3. Due date defaults to issue date + configured days
    4. Client details are captured as a snapshot when the client exists

    Flow:
    1. Resolve issue and due timestamps
    2. Generate invoice number
    3. Build invoice with defaults
    4. Snapshot client details
    5. Persist (derived totals are recomputed on save)
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        client_repo: ClientRepository,
        number_prefix: str = "INV-",
        due_days: int = 14,
        default_terms: str = "Payment due within 14 days",
        default_template: str = TemplateVariant.default().value,
        id_factory: Callable[[], str] = generate_uuid,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.invoice_repo = invoice_repo
        self.client_repo = client_repo
        self.number_prefix = number_prefix
        self.due_days = due_days
        self.default_terms = default_terms
        self.default_template = default_template
        self.id_factory = id_factory
        self.clock = clock

    async def generate_invoice_number(self) -> str:
        """
        Generate the next invoice number

        Format: {prefix}NNNN (e.g., INV-0001)

        Returns:
            Prefix followed by the highest existing sequence + 1
        """
        pattern = re.compile(rf"^{re.escape(self.number_prefix)}(\d+)$")
        invoices = await self.invoice_repo.list_all()

        sequences = [
            int(match.group(1))
            for match in (pattern.match(invoice.invoice_number) for invoice in invoices)
            if match
        ]
        sequence = max(sequences, default=0) + 1

        return f"{self.number_prefix}{sequence:04d}"

    async def execute(self, command: Optional[CreateInvoiceCommandDTO] = None) -> Optional[Invoice]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO (all fields optional)

        Returns:
            The persisted draft Invoice, or None when the write fails
        """
        command = command or CreateInvoiceCommandDTO()

        # Step 1: Resolve timestamps
        issue_date = command.issue_date or self.clock()
        due_date = command.due_date or issue_date + timedelta(days=self.due_days)

        # Step 2: Generate invoice number
        invoice_number = command.invoice_number or await self.generate_invoice_number()

        # Step 3: Build draft invoice
        invoice = Invoice(
            id=self.id_factory(),
            invoice_number=invoice_number,
            issue_date=to_iso_timestamp(issue_date),
            due_date=to_iso_timestamp(due_date),
            items=[],
            notes=command.notes,
            terms=self.default_terms if command.terms is None else command.terms,
            tax_rate=command.tax_rate,
            status=InvoiceStatus.DRAFT,
            template_id=command.template_id or self.default_template,
        )

        # Step 4: Snapshot client details
        if command.client_id:
            client = await self.client_repo.get(command.client_id)
            if client:
                invoice = select_client(invoice, client)
            else:
                logger.warning(
                    f"Client {command.client_id} not found, creating invoice without client details"
                )

        # Step 5: Persist
        created = await self.invoice_repo.save(invoice)
        if created is None:
            logger.error(f"Failed to save draft invoice {invoice.invoice_number} ({invoice.id})")
            return None
        logger.info(f"Created draft invoice {created.invoice_number} ({created.id})")

        return created
