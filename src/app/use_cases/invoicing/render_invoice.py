"""RenderInvoice Use Case

Projects a stored invoice into its on-screen template layout.
"""

import logging
from typing import Optional
from src.app.rendering.renderer import TemplateRenderer
from src.app.repositories.entity_repository import InvoiceRepository, BusinessProfileRepository
from src.domain.layout import InvoiceLayout

logger = logging.getLogger(__name__)


class RenderInvoice:
    """
    Use Case: Render invoice layout

    Business Rules:
    1. Bill-to details come from the invoice snapshot; the client record is
       not consulted, so deleted clients still render
    2. The template is the invoice's own unless overridden
    3. Unknown template ids use the default template

    Flow:
    1. Retrieve invoice by ID
    2. Retrieve business profile
    3. Render layout
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        business_repo: BusinessProfileRepository,
        renderer: TemplateRenderer,
    ):
        self.invoice_repo = invoice_repo
        self.business_repo = business_repo
        self.renderer = renderer

    async def execute(self, invoice_id: str, template_id: Optional[str] = None) -> Optional[InvoiceLayout]:
        """
        Execute invoice rendering

        Args:
            invoice_id: Invoice ID to render
            template_id: Optional template override (e.g., preview another layout)

        Returns:
            InvoiceLayout, or None if the invoice does not exist
        """
        # Step 1: Retrieve invoice
        invoice = await self.invoice_repo.get(invoice_id)

        if invoice is None:
            logger.warning(f"Cannot render: invoice {invoice_id} not found")
            return None

        # Step 2: Retrieve business profile
        business = await self.business_repo.get()

        # Step 3: Render
        return self.renderer.render(invoice, business, template_id)
