"""Parsing and formatting of user-editable amount text."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

_CENTS = Decimal("0.01")


def coerce_amount(value: Any) -> float:
    """Return a finite, non-negative float for a stored amount.

    Anything else (None, text, NaN, infinities, negatives) reads as 0.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return 0.0
    number = float(value)
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def parse_amount_label(text: Any) -> float | None:
    """Parse a label as a non-negative amount.

    Returns None when the label is absent or does not denote a usable
    amount (empty, non-numeric, NaN/inf, negative).
    """
    if text is None:
        return None
    if isinstance(text, (int, float, Decimal)) and not isinstance(text, bool):
        candidate = str(text)
    elif isinstance(text, str):
        candidate = text.strip()
    else:
        return None

    if not candidate:
        return None

    try:
        value = Decimal(candidate)
    except InvalidOperation:
        return None

    if not value.is_finite() or value < 0:
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


def _to_cents(value: float) -> Decimal:
    amount = Decimal(repr(float(value)))
    with localcontext() as ctx:
        # Enough digits for the integer part plus cents
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)


def round_amount(value: float) -> float:
    """Round half-up to two decimals; non-finite values pass through."""
    if not math.isfinite(value):
        return value
    return float(_to_cents(value))


def format_amount(value: float) -> str:
    """Format an amount as label text ("200", "33.33").

    Non-finite values format as "0".
    """
    if not math.isfinite(value):
        return "0"
    quantized = _to_cents(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(quantized.as_tuple().digits))
        if quantized == quantized.to_integral_value():
            return str(quantized.to_integral_value())
        return format(quantized.normalize(), "f")
