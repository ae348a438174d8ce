"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

ZERO = Decimal("0")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Values that cannot be read as a finite number (None, blank or
    non-numeric strings, NaN, infinities, unsupported types) become zero.

    Args:
        value: Raw numeric value from records or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return ZERO
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return ZERO
    return result if result.is_finite() else ZERO


def round_number(value, places: int = 2) -> Decimal:
    """Round a value half-up to a fixed number of decimal places.

    The working precision grows with the magnitude of the value, so large
    amounts keep every integer digit instead of overflowing the quantum.
    """
    number = coerce_decimal(value)
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + places + 2)
        return number.quantize(quantum, rounding=ROUND_HALF_UP)


def round_currency(value) -> Decimal:
    """Round a monetary value to cents."""
    return round_number(value, 2)


__all__ = ["ZERO", "coerce_decimal", "round_number", "round_currency"]
