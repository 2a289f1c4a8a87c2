"""Package Express shipping limits and the rule validator.

Limits are fixed service constants, not configuration. A value equal to
a limit is accepted; only strictly greater values are rejected.
"""

from __future__ import annotations

from pydantic import BaseModel

MAX_WEIGHT = 50
MAX_DIMENSIONS_SUM = 50

TOO_HEAVY_MESSAGE = "Package too heavy to be shipped via Package Express. Have a good day."
TOO_BIG_MESSAGE = "Package too big to be shipped via Package Express."


class ValidationOutcome(BaseModel):
    """Result of one rule check.

    Attributes:
        is_valid: Whether the measurement passed the rule.
        error: User-facing message when invalid, empty otherwise.
    """

    model_config = {"frozen": True}

    is_valid: bool
    error: str = ""

    @classmethod
    def valid(cls) -> ValidationOutcome:
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, error: str) -> ValidationOutcome:
        return cls(is_valid=False, error=error)


class ShippingRulesValidator:
    """Checks a package against the Package Express service limits."""

    def validate_weight(self, weight: float) -> ValidationOutcome:
        if weight > MAX_WEIGHT:
            return ValidationOutcome.invalid(TOO_HEAVY_MESSAGE)
        return ValidationOutcome.valid()

    def validate_dimensions(self, width: float, height: float, length: float) -> ValidationOutcome:
        """Reject packages whose combined dimensions exceed the limit."""
        if width + height + length > MAX_DIMENSIONS_SUM:
            return ValidationOutcome.invalid(TOO_BIG_MESSAGE)
        return ValidationOutcome.valid()
