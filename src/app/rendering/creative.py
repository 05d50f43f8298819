"""Creative template

Banner header, FROM and TO side by side, a date strip with the status
badge, a service table and a highlighted "Total Due".
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
        fields=[LayoutField(key="invoice_number", label="#", value=view.invoice_number)],
    )
    date_strip = details_section(
        view,
        [
            ("issue_date", "ISSUED"),
            ("due_date", "DUE"),
            ("status", "STATUS"),
        ],
    )

    return InvoiceLayout(
        template=TemplateVariant.CREATIVE,
        title="INVOICE",
        sections=[
            header,
            *sender_section(view, title="FROM", keep_empty=True),
            bill_to_section(view, "TO"),
            date_strip,
            line_items_section(view, ["SERVICE", "QTY", "RATE", "AMOUNT"]),
            totals_section(view, "Subtotal", "Total Due"),
            *footer_sections(view, "NOTES", "TERMS & CONDITIONS"),
        ],
    )
