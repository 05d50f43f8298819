"""Invoice view projection

Turns an invoice snapshot plus the business profile into the formatted
values every template variant and document exporter displays. Building
the view once and sharing it keeps screen and export output identical.
"""

import logging
from typing import List, Optional
from pydantic import BaseModel
from src.app.rendering.formatting import (
    format_currency,
    format_date,
    format_percentage,
    DEFAULT_CURRENCY,
)
from src.domain.business import Business
from src.domain.calculations import compute_totals, format_amount, parse_amount
from src.domain.invoice import Invoice
from src.domain.layout import LineItemRow

logger = logging.getLogger(__name__)


class PartyView(BaseModel):
    """Formatted party block (sender or bill-to)"""

    name: str
    address: str = ""
    email: str = ""
    phone: str = ""
    tax_id: str = ""


class InvoiceView(BaseModel):
    """All display values of one invoice"""

    invoice_id: str
    invoice_number: str
    issue_date: str
    due_date: str
    status: str
    currency: str
    sender: Optional[PartyView] = None
    bill_to: PartyView
    rows: List[LineItemRow]
    subtotal: str
    tax_rate: str
    tax: Optional[str] = None
    total: str
    notes: Optional[str] = None
    terms: Optional[str] = None

    @property
    def tax_label(self) -> str:
        return f"Tax ({self.tax_rate}%)"

    @property
    def show_tax(self) -> bool:
        return self.tax is not None


def _optional_text(value: str) -> Optional[str]:
    return value if value and value.strip() else None


def _sender(business: Optional[Business]) -> Optional[PartyView]:
    if business is None:
        return None
    return PartyView(
        name=business.name,
        address=business.address,
        email=business.email,
        phone=business.phone,
        tax_id=business.tax_id or "",
    )


def build_invoice_view(
    invoice: Invoice,
    business: Optional[Business] = None,
    default_currency: str = DEFAULT_CURRENCY,
) -> InvoiceView:
    """
    Project an invoice into display values

    Bill-to details come from the invoice's own client snapshot, never
    from the live client record. Item amounts and totals are read from the
    cached fields through compute_totals.

    Args:
        invoice: Invoice snapshot
        business: Business profile shown as sender (omitted when None)
        default_currency: Currency used when no business profile is set

    Returns:
        InvoiceView with formatted strings
    """
    currency = business.currency if business else default_currency
    totals = compute_totals(invoice)

    if format_amount(totals.total) != invoice.total_amount:
        logger.warning(
            f"Invoice {invoice.id} cached total {invoice.total_amount!r} differs from "
            f"computed {format_amount(totals.total)}"
        )

    rows = [
        LineItemRow(
            item_id=item.id,
            description=item.description,
            quantity=item.quantity,
            unit_price=format_currency(parse_amount(item.price), currency),
            amount=format_currency(item.amount, currency),
        )
        for item in invoice.items
    ]

    return InvoiceView(
        invoice_id=invoice.id,
        invoice_number=invoice.invoice_number,
        issue_date=format_date(invoice.issue_date),
        due_date=format_date(invoice.due_date),
        status=invoice.status.value,
        currency=currency,
        sender=_sender(business),
        bill_to=PartyView(
            name=invoice.client_name,
            address=invoice.client_address,
            email=invoice.client_email,
        ),
        rows=rows,
        subtotal=format_currency(totals.subtotal, currency),
        tax_rate=format_percentage(totals.tax_rate),
        tax=format_currency(totals.tax_amount, currency) if totals.show_tax else None,
        total=format_currency(totals.total, currency),
        notes=_optional_text(invoice.notes),
        terms=_optional_text(invoice.terms),
    )
