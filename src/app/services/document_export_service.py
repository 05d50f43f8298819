"""Document Export Service Interface

Defines the contract for rendering an invoice into a self-contained
exportable document (for printing or sharing).
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional
from src.domain.business import Business
from src.domain.invoice import Invoice


class DocumentFormat(str, Enum):
    """Supported export formats"""
    HTML = "html"
    PDF = "pdf"


class DocumentExportService(ABC):
    """
    Service interface for invoice document export

    Implementations must display the same values as the on-screen
    templates (build them from the shared InvoiceView) and must escape
    every free text field they interpolate.
    """

    document_format: DocumentFormat
    media_type: str
    file_extension: str

    @abstractmethod
    def render_document(self, invoice: Invoice, business: Optional[Business] = None) -> bytes:
        """
        Render an invoice document

        Args:
            invoice: Invoice snapshot with cached totals
            business: Business profile used as the sender block

        Returns:
            Document as bytes
        """
        pass

    def file_name(self, invoice: Invoice) -> str:
        """Suggested file name, e.g. Invoice-INV-0001.pdf"""
        stem = "".join(
            char if char.isalnum() or char in "-_" else "_"
            for char in (invoice.invoice_number or invoice.id)
        )
        return f"Invoice-{stem}.{self.file_extension}"
