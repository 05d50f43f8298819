"""Professional template

Title and number on top with the business block beside them, then
bill-to next to the dates and status, the item table and a right
aligned totals block.
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
from src.domain.layout import InvoiceLayout, LayoutField, LayoutSection, SectionKind
from src.domain.template import TemplateVariant


def render(view: InvoiceView) -> InvoiceLayout:
    header = LayoutSection(
        kind=SectionKind.HEADER,
        title="INVOICE",
        fields=[LayoutField(key="invoice_number", label="", value=view.invoice_number)],
    )
    details = details_section(
        view,
        [
            ("issue_date", "INVOICE DATE"),
            ("due_date", "DUE DATE"),
            ("status", "STATUS"),
        ],
    )

    return InvoiceLayout(
        template=TemplateVariant.PROFESSIONAL,
        title="INVOICE",
        sections=[
            header,
            *sender_section(view),
            bill_to_section(view, "BILL TO"),
            details,
            line_items_section(view, ["DESCRIPTION", "QTY", "PRICE", "AMOUNT"]),
            totals_section(view, "Subtotal", "Total"),
            *footer_sections(view, "Notes", "Terms & Conditions"),
        ],
    )
