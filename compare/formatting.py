# compare/formatting.py
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.conf import settings

MISSING = "—"


def _currency_code():
    return getattr(settings, "COMPARE_CURRENCY", "AED")


def _to_decimal(val, default=None):
    try:
        if val in ("", None) or isinstance(val, bool):
            return default
        return Decimal(str(val))
    except (InvalidOperation, TypeError, ValueError):
        return default


def money(value, code=None) -> str:
    """35500 -> 'AED 35,500' (whole units; cents only when present)."""
    amount = _to_decimal(value)
    if amount is None:
        return MISSING
    code = code or _currency_code()
    if amount == amount.to_integral_value():
        return f"{code} {int(amount):,}"
    amount = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{code} {amount:,}"


def currency(suffix=""):
    def fmt(value):
        text = money(value)
        return text if text == MISSING else f"{text}{suffix}"
    return fmt


def number(unit=""):
    def fmt(value):
        if value is None:
            return MISSING
        amount = _to_decimal(value)
        if amount is None:
            return f"{value}{unit}"
        # drop trailing zeros: 25.20 -> 25.2, 218.0 -> 218
        text = f"{amount:f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return f"{text}{unit}"
    return fmt


def yes_no(value) -> str:
    if value is None:
        return MISSING
    return "Standard" if value else "Not Available"


def text(value) -> str:
    if value is None or value == "":
        return MISSING
    if isinstance(value, bool):
        return yes_no(value)
    return str(value)


def format_value(field, value) -> str:
    if value is None:
        return MISSING
    if field.format is not None:
        return field.format(value)
    return text(value)
