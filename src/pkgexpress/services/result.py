"""How a service operation ended.

A rejected quote is a normal outcome, not a fault: it comes back as
``ok=False`` with a structured error, and the process still exits 0.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class ServiceError(BaseModel):
    """Why an operation did not complete."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Summary of one service operation.

    ``ok`` results never carry an error and failed ones always do.

    Attributes:
        ok: Whether the operation completed (a quote was produced).
        op: Name of the operation (e.g. ``"process_quote"``).
        data: Terminal state, measurements read, and the quote if any.
        error: Set exactly when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None

    @model_validator(mode="after")
    def _error_matches_ok(self) -> ServiceResult:
        if self.ok and self.error is not None:
            raise ValueError("a successful result cannot carry an error")
        if not self.ok and self.error is None:
            raise ValueError("a failed result needs an error")
        return self

    @property
    def state(self) -> str | None:
        """Terminal state the operation ended in, when recorded."""
        return self.data.get("state")
