"""
Amount parsing and vi-VN money display.

Amounts arrive as text and some rows carry junk; a bad amount is worth 0 so
one broken record never blanks the dashboard.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0")


def parse_amount(value: Any) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        amount = Decimal(str(value))
    else:
        raw = str(value).strip()
        if not raw:
            return ZERO
        try:
            amount = Decimal(raw)
        except InvalidOperation:
            return ZERO
    # Decimal accepts "NaN" and "Infinity"; neither is an amount
    if not amount.is_finite():
        return ZERO
    return amount


def format_vnd(value: Decimal, max_fraction_digits: int = 3) -> str:
    """
    Render an amount the vi-VN way: "." groups thousands, "," marks decimals.

    1234567.5 -> "1.234.567,5"; trailing fractional zeros are dropped.
    """
    amount = parse_amount(value)
    quantum = Decimal(1).scaleb(-max_fraction_digits)
    amount = amount.quantize(quantum, rounding=ROUND_HALF_UP)

    sign = "-" if amount < 0 else ""
    text = f"{abs(amount):f}"
    whole, _, frac = text.partition(".")
    frac = frac.rstrip("0")

    grouped = f"{int(whole):,}".replace(",", ".")
    return f"{sign}{grouped},{frac}" if frac else f"{sign}{grouped}"
