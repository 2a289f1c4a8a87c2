"""Shipping cost formula.

No bounds checking happens here; zero or negative measurements flow
through the formula unchanged. Limits are the validator's job.
"""

from __future__ import annotations

PRICE_DIVISOR = 100


class ShippingCostCalculator:
    """Prices a package from its weight and dimensions."""

    def calculate(self, weight: float, width: float, height: float, length: float) -> float:
        return (width * height * length * weight) / PRICE_DIVISOR
