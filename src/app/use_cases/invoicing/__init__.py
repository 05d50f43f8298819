"""Invoicing use cases"""
from .create_invoice import CreateInvoice
from .manage_invoice import SaveInvoice, GetInvoice, DeleteInvoice
from .list_invoices import ListInvoices
from .update_invoice_status import UpdateInvoiceStatus
from .dashboard_summary import GetDashboardSummary
from .render_invoice import RenderInvoice
from .export_invoice import ExportInvoice
from .dtos import (
    CreateInvoiceCommandDTO,
    ListInvoicesQueryDTO,
    DashboardSummaryDTO,
    ExportedDocumentDTO,
)

__all__ = [
    "CreateInvoice",
    "SaveInvoice",
    "GetInvoice",
    "DeleteInvoice",
    "ListInvoices",
    "UpdateInvoiceStatus",
    "GetDashboardSummary",
    "RenderInvoice",
    "ExportInvoice",
    "CreateInvoiceCommandDTO",
    "ListInvoicesQueryDTO",
    "DashboardSummaryDTO",
    "ExportedDocumentDTO",
]
