"""Minimal template

Plain title, business block, a compact detail list, then bill-to and
the item table.
"""

from src.app.rendering.sections import (
    bill_to_section,
    details_section,
    footer_sections,
    line_items_section,
    sender_section,
    totals_section,
)
from src.app.rendering.view import InvoiceView
from src.domain.layout import InvoiceLayout, LayoutSection, SectionKind
from src.domain.template import TemplateVariant


def render(view: InvoiceView) -> InvoiceLayout:
    details = details_section(
        view,
        [
            ("invoice_number", "INVOICE #:"),
            ("issue_date", "DATE:"),
            ("due_date", "DUE DATE:"),
            ("status", "STATUS:"),
        ],
    )

    return InvoiceLayout(
        template=TemplateVariant.MINIMAL,
        title="INVOICE",
        sections=[
            LayoutSection(kind=SectionKind.HEADER, title="INVOICE"),
            *sender_section(view),
            details,
            bill_to_section(view, "BILL TO"),
            line_items_section(view, ["Item", "Qty", "Price", "Amount"]),
            totals_section(view, "Subtotal", "Total"),
            *footer_sections(view, "Notes", "Terms & Conditions"),
        ],
    )
