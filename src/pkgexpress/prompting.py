"""Numeric prompts that re-ask until the answer parses.

There is no retry cap: the loop only ends when a number is entered, or
when input ends (EOF), which aborts the run.
"""

from __future__ import annotations

import logging
import sys

import click

from pkgexpress.domain.measurements import parse_number

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input. Please enter a numeric value."


class ConsoleInput:
    """Terminal implementation of the NumberInput contract.

    Prompts are written on their own line and answers are read a whole
    line at a time from standard input.
    """

    def get_number(self, prompt: str) -> float:
        """Show *prompt* and read lines until one parses as a number.

        Raises:
            click.Abort: Standard input was closed before a number arrived.
        """
        while True:
            click.echo(prompt)
            line = sys.stdin.readline()
            if not line:
                logger.debug("End of input while waiting for %r", prompt)
                raise click.Abort()
            value = parse_number(line)
            if value is not None:
                return value
            logger.debug("Rejected non-numeric input for %r: %r", prompt, line.rstrip("\n"))
            click.echo(INVALID_INPUT_MESSAGE)
