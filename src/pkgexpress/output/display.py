"""Terminal Display: one line per call on a Rich Console."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pkgexpress.output.formatters import format_quote

if TYPE_CHECKING:
    from rich.console import Console


class ConsoleDisplay:
    """Terminal implementation of the Display contract."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def show_message(self, message: str) -> None:
        self._console.print(message, style="pe.message")

    def show_error(self, error: str) -> None:
        self._console.print(error, style="pe.error")

    def show_quote(self, amount: float) -> None:
        self._console.print(format_quote(amount), style="pe.quote")
