"""Invoice Domain Entity

Tracks invoices, their line items and payment status.
"""

from enum import Enum
from typing import List
from pydantic import Field, field_validator
from src.domain.base import BaseModel, generate_uuid, coerce_text
from src.domain.invoice_item import InvoiceItem
from src.domain.template import TemplateVariant


class InvoiceStatus(str, Enum):
    """Invoice status labels"""
    DRAFT = "DRAFT"
    PENDING = "PENDING"
    PAID = "PAID"
    OVERDUE = "OVERDUE"

    @classmethod
    def parse(cls, value) -> "InvoiceStatus":
        """Lenient decode; unknown labels load as DRAFT"""
        if isinstance(value, cls):
            return value
        normalized = str(value or "").strip().upper()
        for status in cls:
            if status.value == normalized:
                return status
        return cls.DRAFT


class Invoice(BaseModel):
    """
    Invoice - Central billing aggregate

    Domain Rules:
    - Client fields are a snapshot taken when the client was selected,
      later client edits or deletes do not change them
    - items order is the print order and is preserved as stored
    - total_amount = round(sum(item.amount) * (1 + tax_rate / 100), 2),
      cached and recomputed on every write
    - status is a free-form label, any status may follow any other
    - Unknown template_id renders with the default template
    """

    id: str = Field(
        default_factory=generate_uuid,
        description="Unique invoice identifier"
    )

    invoice_number: str = Field(
        default="",
        description="Human readable, user editable invoice number (e.g., INV-0001)"
    )

    client_id: str = Field(
        default="",
        description="Referenced client id"
    )

    client_name: str = Field(
        default="",
        description="Client name snapshot"
    )

    client_address: str = Field(
        default="",
        description="Client address snapshot"
    )

    client_email: str = Field(
        default="",
        description="Client email snapshot"
    )

    issue_date: str = Field(
        default="",
        description="Issue timestamp (ISO-8601)"
    )

    due_date: str = Field(
        default="",
        description="Due timestamp (ISO-8601)"
    )

    items: List[InvoiceItem] = Field(
        default_factory=list,
        description="Ordered line items"
    )

    notes: str = Field(
        default="",
        description="Optional free text notes"
    )

    terms: str = Field(
        default="",
        description="Optional free text terms and conditions"
    )

    tax_rate: str = Field(
        default="0",
        description="Tax percentage applied to the subtotal, as a decimal string"
    )

    total_amount: str = Field(
        default="0.00",
        description="Cached grand total (subtotal + tax), as a decimal string"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.DRAFT,
        description="Invoice status (DRAFT, PENDING, PAID, OVERDUE)"
    )

    template_id: str = Field(
        default=TemplateVariant.default().value,
        description="Rendering template id"
    )

    @field_validator(
        "invoice_number", "client_id", "client_name", "client_address",
        "client_email", "issue_date", "due_date", "notes", "terms",
        "tax_rate", "total_amount",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value):
        return coerce_text(value)

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value):
        return InvoiceStatus.parse(value)

    @field_validator("template_id", mode="before")
    @classmethod
    def _default_template(cls, value):
        return value or TemplateVariant.default().value

    @property
    def template(self) -> TemplateVariant:
        return TemplateVariant.resolve(self.template_id)
