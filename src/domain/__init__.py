from .base import BaseModel, generate_uuid
from .business import Business
from .client import Client
from .invoice import Invoice, InvoiceStatus
from .invoice_item import InvoiceItem
from .layout import InvoiceLayout, LayoutField, LayoutSection, LineItemRow, SectionKind
from .product import Product
from .template import TemplateVariant

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Business",
    "Client",
    "Invoice",
    "InvoiceStatus",
    "InvoiceItem",
    "InvoiceLayout",
    "LayoutField",
    "LayoutSection",
    "LineItemRow",
    "SectionKind",
    "Product",
    "TemplateVariant",
]
