"""Quote flow states and the allowed transitions between them.

The flow is strictly forward: there is no path back from a later state
to an earlier one, and both terminal states have no exits.
"""

from __future__ import annotations

from enum import StrEnum


class QuoteState(StrEnum):
    """States of one quote run."""

    GREET = "greet"
    WEIGHT = "weight"
    DIMENSIONS = "dimensions"
    QUOTE = "quote"
    REJECTED = "rejected"
    DONE = "done"


TERMINAL_STATES: frozenset[QuoteState] = frozenset({QuoteState.REJECTED, QuoteState.DONE})

QUOTE_TRANSITIONS: dict[str, list[str]] = {
    "greet": ["weight"],
    "weight": ["dimensions", "rejected"],
    "dimensions": ["quote", "rejected"],
    "quote": ["done"],
    "rejected": [],
    "done": [],
}


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]] = QUOTE_TRANSITIONS,
) -> bool:
    """Check if transitioning from *current* to *target* is allowed."""
    allowed = transitions.get(current, [])
    return target in allowed


def is_terminal(state: str) -> bool:
    return state in TERMINAL_STATES
