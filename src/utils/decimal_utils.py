"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through ``str`` so ``0.1`` stays ``Decimal("0.1")``.

    Args:
        value: Raw numeric value from SQL, commands or adapters.

    Returns:
        Decimal: Normalized numeric value. Unparseable input yields NaN so
        callers can reject it with their own domain error.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return Decimal("NaN")
    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        return Decimal("NaN")


__all__ = ["coerce_decimal"]
