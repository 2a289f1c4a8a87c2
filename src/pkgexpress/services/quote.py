"""Quote flow: greet, weigh, measure, then quote or reject.

States: greet -> weight -> dimensions -> quote -> done. A failed rule
check ends the run in ``rejected`` after showing the rule's message; the
remaining prompts are never shown and there is no retry.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

from pkgexpress.domain.states import QuoteState, is_terminal, is_valid_transition
from pkgexpress.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from pkgexpress.services.contracts import Calculator, Display, NumberInput, Validator

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to Package Express. Please follow the instructions below."
CLOSING_MESSAGE = "Thank you!"

WEIGHT_PROMPT = "Please enter the package weight:"
WIDTH_PROMPT = "Please enter the package width:"
HEIGHT_PROMPT = "Please enter the package height:"
LENGTH_PROMPT = "Please enter the package length:"

_OP = "process_quote"


class QuoteService:
    """Coordinates display, input, validation, and pricing for one quote.

    Usage::

        svc = QuoteService(display, number_input, validator, calculator)
        result = svc.process_quote()
    """

    def __init__(
        self,
        display: Display,
        number_input: NumberInput,
        validator: Validator,
        calculator: Calculator,
    ) -> None:
        self._display = display
        self._input = number_input
        self._validator = validator
        self._calculator = calculator
        self._state = QuoteState.GREET
        self._log = structlog.get_logger(__name__)

    @property
    def state(self) -> QuoteState:
        """Current state of the flow (terminal once the run has finished)."""
        return self._state

    def process_quote(self) -> ServiceResult:
        """Run the quote flow once and summarise how it ended."""
        if is_terminal(self._state):
            msg = f"Quote run already finished in state '{self._state}'"
            raise RuntimeError(msg)

        self._display.show_message(WELCOME_MESSAGE)
        self._advance(QuoteState.WEIGHT)

        weight = self._input.get_number(WEIGHT_PROMPT)
        outcome = self._validator.validate_weight(weight)
        if not outcome.is_valid:
            return self._reject("TOO_HEAVY", outcome.error, weight=weight)
        self._advance(QuoteState.DIMENSIONS)

        width = self._input.get_number(WIDTH_PROMPT)
        height = self._input.get_number(HEIGHT_PROMPT)
        length = self._input.get_number(LENGTH_PROMPT)
        measurements = {"weight": weight, "width": width, "height": height, "length": length}

        outcome = self._validator.validate_dimensions(width, height, length)
        if not outcome.is_valid:
            return self._reject("TOO_BIG", outcome.error, **measurements)
        self._advance(QuoteState.QUOTE)

        quote = self._calculator.calculate(weight, width, height, length)
        self._display.show_quote(quote)
        self._display.show_message(CLOSING_MESSAGE)
        self._advance(QuoteState.DONE)

        return ServiceResult(
            ok=True,
            op=_OP,
            data={"state": str(self._state), **measurements, "quote": quote},
        )

    # ------------------------------------------------------------------

    def _advance(self, target: QuoteState) -> None:
        if not is_valid_transition(self._state, target):
            msg = f"Invalid quote transition: {self._state} -> {target}"
            raise RuntimeError(msg)
        self._log.debug("quote.transition", source=str(self._state), target=str(target))
        self._state = target

    def _reject(self, code: str, message: str, **measurements: Any) -> ServiceResult:
        self._display.show_error(message)
        self._advance(QuoteState.REJECTED)
        logger.info("Quote rejected: %s", code)
        return ServiceResult(
            ok=False,
            op=_OP,
            data={"state": str(self._state), **measurements},
            error=ServiceError(code=code, message=message, detail=measurements),
        )
