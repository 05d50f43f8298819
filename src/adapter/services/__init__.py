from .html_export_service import HtmlDocumentExportService
from .pdf_service import ReportLabPdfService

__all__ = [
    "HtmlDocumentExportService",
    "ReportLabPdfService",
]
