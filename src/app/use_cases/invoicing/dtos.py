"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from src.app.services.document_export_service import DocumentFormat
from src.domain.invoice import InvoiceStatus


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating a draft invoice

    Used as input to CreateInvoice use case. Omitted fields take the
    configured defaults.
    """

    client_id: Optional[str] = Field(
        default=None,
        description="Client to snapshot onto the invoice"
    )

    invoice_number: Optional[str] = Field(
        default=None,
        description="Explicit invoice number (generated when omitted)"
    )

    issue_date: Optional[datetime] = Field(
        default=None,
        description="Issue timestamp (defaults to now)"
    )

    due_date: Optional[datetime] = Field(
        default=None,
        description="Due timestamp (defaults to issue date + configured days)"
    )

    tax_rate: str = Field(
        default="0",
        description="Tax percentage as a decimal string"
    )

    template_id: Optional[str] = Field(
        default=None,
        description="Template id (defaults to the configured template)"
    )

    notes: str = Field(default="", description="Invoice notes")

    terms: Optional[str] = Field(
        default=None,
        description="Terms and conditions (defaults to configured terms)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": "6f1c0a7e-4d1b-4a4e-9c9a-0c6b1f7f2b11",
                "tax_rate": "10",
                "template_id": "professional",
                "notes": "Thank you for your business",
            }
        }


class ListInvoicesQueryDTO(BaseModel):
    """Query DTO for listing invoices"""

    search: str = Field(
        default="",
        description="Case-insensitive match on invoice number or client name"
    )

    status: Optional[InvoiceStatus] = Field(
        default=None,
        description="Only invoices with this status"
    )


class DashboardSummaryDTO(BaseModel):
    """
    Response DTO for the invoice dashboard

    Amounts are sums of cached invoice totals per status.
    """

    total_paid: str = Field(..., description="Sum of PAID totals (decimal string)")
    total_pending: str = Field(..., description="Sum of PENDING totals (decimal string)")
    total_overdue: str = Field(..., description="Sum of OVERDUE totals (decimal string)")

    formatted_paid: str = Field(..., description="total_paid formatted as currency")
    formatted_pending: str = Field(..., description="total_pending formatted as currency")
    formatted_overdue: str = Field(..., description="total_overdue formatted as currency")

    invoice_count: int = Field(..., description="Number of invoices")
    paid_count: int = Field(..., description="Number of PAID invoices")
    pending_count: int = Field(..., description="Number of PENDING invoices")
    overdue_count: int = Field(..., description="Number of OVERDUE invoices")
    draft_count: int = Field(..., description="Number of DRAFT invoices")


class ExportedDocumentDTO(BaseModel):
    """
    Response DTO for an exported invoice document

    Handed to the external print/share mechanism.
    """

    invoice_id: str = Field(..., description="Invoice ID")
    invoice_number: str = Field(..., description="Invoice number")
    document_format: DocumentFormat = Field(..., description="Export format (html, pdf)")
    media_type: str = Field(..., description="MIME type of the content")
    file_name: str = Field(..., description="Suggested file name")
    content_base64: str = Field(..., description="Document content, base64 encoded")
    generated_at: datetime = Field(..., description="Generation timestamp (UTC)")

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": "0b5f4e8e-2a53-4c2c-a0ef-8a2b1f1d6c33",
                "invoice_number": "INV-0001",
                "document_format": "pdf",
                "media_type": "application/pdf",
                "file_name": "Invoice-INV-0001.pdf",
                "content_base64": "JVBERi0xLjQKJeLjz9...",
                "generated_at": "2024-02-01T00:00:00Z",
            }
        }
