"""Invoice Layout

Structured description of a rendered invoice: an ordered list of
labelled sections. Field keys are stable across template variants,
labels and titles are not.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.template import TemplateVariant


class SectionKind(str, Enum):
    """Kinds of layout sections"""
    HEADER = "header"
    SENDER = "sender"
    BILL_TO = "bill_to"
    DETAILS = "details"
    LINE_ITEMS = "line_items"
    TOTALS = "totals"
    NOTES = "notes"
    TERMS = "terms"


class LayoutField(BaseModel):
    """One labelled value (e.g., key=due_date, label=DUE DATE, value=Feb 14, 2024)"""

    key: str
    label: str
    value: str


class LineItemRow(BaseModel):
    """One formatted row of the line item table"""

    item_id: str
    description: str
    quantity: str
    unit_price: str
    amount: str


class LayoutSection(BaseModel):
    """A block of the layout"""

    kind: SectionKind
    title: str = ""
    fields: List[LayoutField] = Field(default_factory=list)
    columns: List[str] = Field(default_factory=list)
    rows: List[LineItemRow] = Field(default_factory=list)

    def value(self, key: str) -> Optional[str]:
        for field in self.fields:
            if field.key == key:
                return field.value
        return None


class InvoiceLayout(BaseModel):
    """
    Rendered invoice layout

    Produced by one of the template variants. Every variant carries the
    same field keys and rows for the same invoice.
    """

    template: TemplateVariant
    title: str
    sections: List[LayoutSection] = Field(default_factory=list)

    def section(self, kind: SectionKind) -> Optional[LayoutSection]:
        for section in self.sections:
            if section.kind == kind:
                return section
        return None

    def has_section(self, kind: SectionKind) -> bool:
        return self.section(kind) is not None

    def value(self, key: str) -> Optional[str]:
        """First value with the given field key, in section order"""
        for section in self.sections:
            found = section.value(key)
            if found is not None:
                return found
        return None

    @property
    def rows(self) -> List[LineItemRow]:
        table = self.section(SectionKind.LINE_ITEMS)
        return list(table.rows) if table else []
