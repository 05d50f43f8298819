from .document_export_service import DocumentExportService, DocumentFormat

__all__ = [
    "DocumentExportService",
    "DocumentFormat",
]
