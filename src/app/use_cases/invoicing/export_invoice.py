"""ExportInvoice Use Case

Renders an invoice into a standalone document for printing or sharing.
"""

import base64
import logging
from datetime import datetime, timezone
from typing import Dict, Optional
from src.app.repositories.entity_repository import InvoiceRepository, BusinessProfileRepository
from src.app.services.document_export_service import DocumentExportService, DocumentFormat
from .dtos import ExportedDocumentDTO

logger = logging.getLogger(__name__)


class ExportInvoice:
    """
    Use Case: Export invoice document

    Business Rules:
    1. The document shows the same values as the on-screen templates
    2. The sender block is the stored business profile (omitted when none)
    3. Content is handed over base64 encoded with a suggested file name

    Flow:
    1. Resolve exporter for the requested format
    2. Retrieve invoice and business profile
    3. Render document
    4. Wrap in response DTO
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        business_repo: BusinessProfileRepository,
        exporters: Dict[DocumentFormat, DocumentExportService],
    ):
        self.invoice_repo = invoice_repo
        self.business_repo = business_repo
        self.exporters = exporters

    async def execute(
        self,
        invoice_id: str,
        document_format: DocumentFormat = DocumentFormat.HTML,
    ) -> Optional[ExportedDocumentDTO]:
        """
        Execute invoice export

        Args:
            invoice_id: Invoice ID to export
            document_format: Output format

        Returns:
            ExportedDocumentDTO, or None if the invoice does not exist

        Raises:
            ValueError: If no exporter is registered for the format
        """
        # Step 1: Resolve exporter
        exporter = self.exporters.get(DocumentFormat(document_format))
        if exporter is None:
            raise ValueError(f"No exporter registered for format '{document_format}'")

        # Step 2: Retrieve invoice and business profile
        invoice = await self.invoice_repo.get(invoice_id)
        if invoice is None:
            logger.warning(f"Cannot export: invoice {invoice_id} not found")
            return None

        business = await self.business_repo.get()

        # Step 3: Render document
        content = exporter.render_document(invoice, business)

        logger.info(
            f"Exported invoice {invoice.invoice_number} as {exporter.document_format.value} "
            f"({len(content)} bytes)"
        )

        # Step 4: Build response
        return ExportedDocumentDTO(
            invoice_id=invoice.id,
            invoice_number=invoice.invoice_number,
            document_format=exporter.document_format,
            media_type=exporter.media_type,
            file_name=exporter.file_name(invoice),
            content_base64=base64.b64encode(content).decode("ascii"),
            generated_at=datetime.now(timezone.utc),
        )
