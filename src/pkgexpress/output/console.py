"""Rich Console factory and theme for the quote dialogue.

Highlighting, markup, and emoji are disabled so user-facing sentences
(which contain ``$`` amounts and colons) print verbatim. In non-TTY
environments (tests, pipes) Rich automatically drops color codes.
"""

from __future__ import annotations

from typing import IO

from rich.console import Console
from rich.theme import Theme

PE_THEME = Theme(
    {
        "pe.message": "",
        "pe.error": "bold red",
        "pe.quote": "bold green",
    }
)


def create_console(
    *,
    file: IO[str] | None = None,
    no_color: bool = False,
    width: int | None = None,
) -> Console:
    """Create the Console used for all user-facing output.

    Args:
        file: Target stream. None writes to whatever ``sys.stdout`` is at
            print time, which keeps Click's CliRunner capture working.
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=file,
        theme=PE_THEME,
        no_color=no_color,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
        width=width,
    )
