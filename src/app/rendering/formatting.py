"""Formatting utilities

Currency and date formatting shared by every rendering surface.
Output is locale-fixed (en-US style) so it is deterministic.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Optional
from src.domain.calculations import parse_amount, round_currency

DEFAULT_CURRENCY = "USD"

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
    "CAD": "CA$",
    "AUD": "A$",
    "MXN": "MX$",
    "CNY": "CN¥",
}

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_currency(amount: Any, currency: Optional[str] = None) -> str:
    """
    Format an amount as currency, e.g. $1,234.50

    Args:
        amount: Decimal, number or decimal string (parsed leniently)
        currency: ISO 4217 code; defaults to USD

    Returns:
        Symbol, thousands separators and 2 decimals. Codes without a known
        symbol render as "CHF 1,234.50".
    """
    code = (currency or DEFAULT_CURRENCY).strip().upper() or DEFAULT_CURRENCY
    value = round_currency(parse_amount(amount))
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.2f}"

    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{sign}{code} {digits}"
    return f"{sign}{symbol}{digits}"


def _parse_timestamp(value: str) -> date:
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    if "T" not in text and " " not in text:
        return date.fromisoformat(text)
    return datetime.fromisoformat(text).date()


def format_date(iso_timestamp: Optional[str]) -> str:
    """
    Render a stored ISO-8601 timestamp as a short date, e.g. Jan 5, 2024

    The timestamp's own calendar date is used, without time zone
    conversion. Never raises: input that cannot be parsed is returned
    unchanged.
    """
    if not iso_timestamp:
        return ""

    try:
        day = _parse_timestamp(str(iso_timestamp))
    except ValueError:
        return str(iso_timestamp)

    return f"{MONTH_ABBREVIATIONS[day.month - 1]} {day.day}, {day.year}"


def to_iso_timestamp(moment: datetime) -> str:
    """Persisted timestamp form: 2024-01-31T12:00:00.000Z (UTC, milliseconds)"""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def format_percentage(rate: Any) -> str:
    """Normalised percentage for labels: "10.00" -> "10", "7.50" -> "7.5" """
    value = parse_amount(rate)
    if value == value.to_integral_value():
        return f"{value.quantize(Decimal(1)):f}"
    return f"{value.normalize():f}"
