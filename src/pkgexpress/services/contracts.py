"""Collaborator contracts consumed by the quote service.

Structural protocols: any object with matching methods satisfies them,
so tests can inject scripted fakes without inheriting from anything.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pkgexpress.domain.rules import ValidationOutcome


@runtime_checkable
class Display(Protocol):
    """Writes user-facing lines."""

    def show_message(self, message: str) -> None: ...

    def show_error(self, error: str) -> None: ...

    def show_quote(self, amount: float) -> None: ...


@runtime_checkable
class NumberInput(Protocol):
    """Reads a number, re-asking until the user supplies one."""

    def get_number(self, prompt: str) -> float: ...


@runtime_checkable
class Validator(Protocol):
    """Checks measurements against the service limits."""

    def validate_weight(self, weight: float) -> ValidationOutcome: ...

    def validate_dimensions(
        self, width: float, height: float, length: float
    ) -> ValidationOutcome: ...


@runtime_checkable
class Calculator(Protocol):
    """Prices a package."""

    def calculate(self, weight: float, width: float, height: float, length: float) -> float: ...
