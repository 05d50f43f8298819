"""Invoice Computation Engine

Pure functions that derive item amounts and invoice totals.

All money math is done with Decimal and rounded half-up to 2 places.
Malformed numeric strings never raise, they count as 0.
"""

import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any
from pydantic import BaseModel
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")

# Values at or beyond this magnitude are treated like non-finite input
MAX_MAGNITUDE = Decimal("1e100")

# Longest leading decimal literal, as parseFloat reads it
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_PRECISION = 250


class InvoiceTotals(BaseModel):
    """Derived money figures for one invoice"""

    subtotal: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    total: Decimal

    @property
    def show_tax(self) -> bool:
        """Tax line is only shown for a positive rate"""
        return self.tax_rate > ZERO


def parse_amount(value: Any) -> Decimal:
    """
    Leniently parse a decimal string

    Args:
        value: Raw user/stored value (string, number or None)

    Returns:
        Parsed Decimal, or 0 when the value is missing, unparsable or
        not a finite amount
    """
    if value is None or isinstance(value, bool):
        return ZERO

    if isinstance(value, (int, Decimal)):
        number = Decimal(value)
    else:
        match = _LEADING_NUMBER.match(str(value).strip())
        if not match:
            return ZERO
        number = Decimal(match.group(0))

    if not number.is_finite() or abs(number) >= MAX_MAGNITUDE:
        return ZERO
    return number


def round_currency(value: Decimal) -> Decimal:
    """Round half-up to cents; -0.00 normalises to 0.00"""
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        rounded = value.quantize(CENT, rounding=ROUND_HALF_UP)
    if rounded == ZERO:
        return ZERO.quantize(CENT)
    return rounded


def format_amount(value: Decimal) -> str:
    """Fixed 2-decimal string, the persisted form of money fields"""
    return f"{round_currency(value):f}"


def recompute_item_amount(item: InvoiceItem) -> InvoiceItem:
    """
    Recompute a line item's cached amount

    Args:
        item: Invoice item with raw quantity and price

    Returns:
        Copy of the item with amount = round(quantity * price, 2)
    """
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        amount = parse_amount(item.quantity) * parse_amount(item.price)
    return item.model_copy(update={"amount": format_amount(amount)})


def compute_totals(invoice: Invoice) -> InvoiceTotals:
    """
    Derive subtotal, tax and total from the invoice's item amounts

    Item amounts are read as stored, so call recompute_invoice first when
    quantities or prices may have changed.

    Args:
        invoice: Invoice to compute

    Returns:
        InvoiceTotals with rounded tax amount and total
    """
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        subtotal = sum((parse_amount(item.amount) for item in invoice.items), ZERO)
        tax_rate = parse_amount(invoice.tax_rate)
        tax_amount = subtotal * tax_rate / HUNDRED
        total = subtotal + tax_amount

    return InvoiceTotals(
        subtotal=round_currency(subtotal),
        tax_rate=tax_rate,
        tax_amount=round_currency(tax_amount),
        total=round_currency(total),
    )


def recompute_invoice_total(invoice: Invoice) -> Invoice:
    """
    Recompute the cached invoice total from item amounts and tax rate

    Returns:
        Copy of the invoice with total_amount refreshed
    """
    totals = compute_totals(invoice)
    return invoice.model_copy(update={"total_amount": format_amount(totals.total)})


def recompute_invoice(invoice: Invoice) -> Invoice:
    """
    Single recomputation entry point for every invoice write

    Refreshes each item amount, then the invoice total. Idempotent:
    recomputing a recomputed invoice yields identical strings.
    """
    items = [recompute_item_amount(item) for item in invoice.items]
    return recompute_invoice_total(invoice.model_copy(update={"items": items}))
