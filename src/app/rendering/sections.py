"""Section builders shared by the template variants

Variants choose titles, labels, column headers and section order.
The builders guarantee the field keys and values are the same everywhere.
"""

from typing import List, Sequence, Tuple
from src.app.rendering.view import InvoiceView, PartyView
from src.domain.layout import LayoutField, LayoutSection, SectionKind


PARTY_LABELS = (
    ("address", "Address"),
    ("email", "Email"),
    ("phone", "Phone"),
    ("tax_id", "Tax ID"),
)


def party_fields(party: PartyView, prefix: str) -> List[LayoutField]:
    fields = [LayoutField(key=f"{prefix}_name", label="Name", value=party.name)]
    for attribute, label in PARTY_LABELS:
        value = getattr(party, attribute)
        if value:
            fields.append(LayoutField(key=f"{prefix}_{attribute}", label=label, value=value))
    return fields


def sender_section(view: InvoiceView, title: str = "", keep_empty: bool = False) -> List[LayoutSection]:
    """Business block; omitted without a profile unless keep_empty"""
    if view.sender is None:
        if keep_empty:
            return [LayoutSection(kind=SectionKind.SENDER, title=title)]
        return []
    return [
        LayoutSection(
            kind=SectionKind.SENDER,
            title=title,
            fields=party_fields(view.sender, "business"),
        )
    ]


def bill_to_section(view: InvoiceView, title: str) -> LayoutSection:
    """Full bill-to block; address and email are always present"""
    return LayoutSection(
        kind=SectionKind.BILL_TO,
        title=title,
        fields=[
            LayoutField(key="client_name", label="Name", value=view.bill_to.name),
            LayoutField(key="client_address", label="Address", value=view.bill_to.address),
            LayoutField(key="client_email", label="Email", value=view.bill_to.email),
        ],
    )


def details_section(view: InvoiceView, labels: Sequence[Tuple[str, str]]) -> LayoutSection:
    """
    Invoice detail fields in the given (key, label) order

    Keys: invoice_number, issue_date, due_date, status
    """
    values = {
        "invoice_number": view.invoice_number,
        "issue_date": view.issue_date,
        "due_date": view.due_date,
        "status": view.status,
    }
    return LayoutSection(
        kind=SectionKind.DETAILS,
        fields=[LayoutField(key=key, label=label, value=values[key]) for key, label in labels],
    )


def line_items_section(view: InvoiceView, columns: Sequence[str]) -> LayoutSection:
    return LayoutSection(
        kind=SectionKind.LINE_ITEMS,
        columns=list(columns),
        rows=list(view.rows),
    )


def totals_section(view: InvoiceView, subtotal_label: str, total_label: str) -> LayoutSection:
    """Subtotal, tax (only for a positive rate) and total"""
    fields = [LayoutField(key="subtotal", label=subtotal_label, value=view.subtotal)]
    if view.show_tax:
        fields.append(LayoutField(key="tax", label=view.tax_label, value=view.tax))
    fields.append(LayoutField(key="total", label=total_label, value=view.total))
    return LayoutSection(kind=SectionKind.TOTALS, fields=fields)


def footer_sections(view: InvoiceView, notes_title: str, terms_title: str) -> List[LayoutSection]:
    """Notes and terms blocks, each only when non-empty"""
    sections = []
    if view.notes:
        sections.append(
            LayoutSection(
                kind=SectionKind.NOTES,
                title=notes_title,
                fields=[LayoutField(key="notes", label=notes_title, value=view.notes)],
            )
        )
    if view.terms:
        sections.append(
            LayoutSection(
                kind=SectionKind.TERMS,
                title=terms_title,
                fields=[LayoutField(key="terms", label=terms_title, value=view.terms)],
            )
        )
    return sections
