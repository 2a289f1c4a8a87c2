"""Text formatting for quote output."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

QUOTE_TEMPLATE = "Your estimated total for shipping this package is: {amount}"

_CENTS = Decimal("0.01")


def format_currency(amount: float) -> str:
    """Render *amount* as dollars with exactly two decimal places.

    Exact ties round away from zero (0.125 -> $0.13), on the exact
    binary value of *amount*.
    """
    cents = Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"${cents}"


def format_quote(amount: float) -> str:
    """Build the quote sentence shown to the user."""
    return QUOTE_TEMPLATE.format(amount=format_currency(amount))
