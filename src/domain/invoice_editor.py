"""Invoice editing operations

Pure functions for every mutation of an invoice. Each returns a new
Invoice that has been passed through recompute_invoice, so cached
amounts never drift from items and tax rate.
"""

from typing import Optional
from src.domain.base import coerce_text, generate_uuid
from src.domain.calculations import recompute_invoice
from src.domain.client import Client
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem
from src.domain.product import Product

EDITABLE_ITEM_FIELDS = ("description", "quantity", "price")


def add_item(
    invoice: Invoice,
    description: str = "",
    quantity: str = "1",
    price: str = "0",
    item_id: Optional[str] = None,
) -> Invoice:
    """Append a line item at the end of the invoice"""
    item = InvoiceItem(
        id=item_id or generate_uuid(),
        description=description,
        quantity=quantity,
        price=price,
    )
    return recompute_invoice(invoice.model_copy(update={"items": [*invoice.items, item]}))


def add_product_item(
    invoice: Invoice,
    product: Product,
    quantity: str = "1",
    item_id: Optional[str] = None,
) -> Invoice:
    """
    Append a line item prefilled from a catalog product

    The product is copied by value. Later product edits do not reach the item.
    """
    return add_item(
        invoice,
        description=product.name,
        quantity=quantity,
        price=product.price,
        item_id=item_id,
    )


def update_item(invoice: Invoice, item_id: str, **changes: str) -> Invoice:
    """
    Edit description, quantity or price of one line item

    amount is derived and cannot be set. Other fields are ignored, and so is
    an unknown item_id.
    """
    allowed = {
        key: coerce_text(value)
        for key, value in changes.items()
        if key in EDITABLE_ITEM_FIELDS
    }
    items = [
        item.model_copy(update=allowed) if item.id == item_id else item
        for item in invoice.items
    ]
    return recompute_invoice(invoice.model_copy(update={"items": items}))


def remove_item(invoice: Invoice, item_id: str) -> Invoice:
    items = [item for item in invoice.items if item.id != item_id]
    return recompute_invoice(invoice.model_copy(update={"items": items}))


def set_tax_rate(invoice: Invoice, tax_rate: str) -> Invoice:
    return recompute_invoice(invoice.model_copy(update={"tax_rate": coerce_text(tax_rate)}))


def select_client(invoice: Invoice, client: Client) -> Invoice:
    """Capture a snapshot of the client's billing details on the invoice"""
    return invoice.model_copy(
        update={
            "client_id": client.id,
            "client_name": client.name,
            "client_address": client.address or "",
            "client_email": client.email or "",
        }
    )


def set_status(invoice: Invoice, status) -> Invoice:
    """Move to any status; there are no illegal transitions"""
    return invoice.model_copy(update={"status": InvoiceStatus.parse(status)})
