"""Per-invocation wiring of settings, logging, and terminal collaborators.

Created once by the CLI command. The console is built lazily so
``--help`` and ``--version`` never touch it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rich.console import Console

    from pkgexpress.config.settings import PkgExpressSettings
    from pkgexpress.services.contracts import NumberInput
    from pkgexpress.services.quote import QuoteService
    from pkgexpress.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context for one pkgexpress invocation."""

    def __init__(self, settings: PkgExpressSettings) -> None:
        self.settings = settings
        self._console: Console | None = None

        from pkgexpress.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def console(self) -> Console:
        """The user-facing console (created lazily on first access)."""
        if self._console is None:
            from pkgexpress.output.console import create_console

            self._console = create_console(no_color=self.settings.no_color)
        return self._console

    def quote_service(self, number_input: NumberInput | None = None) -> QuoteService:
        """Build a QuoteService over the terminal display and input."""
        from pkgexpress.domain.pricing import ShippingCostCalculator
        from pkgexpress.domain.rules import ShippingRulesValidator
        from pkgexpress.output.display import ConsoleDisplay
        from pkgexpress.prompting import ConsoleInput
        from pkgexpress.services.quote import QuoteService

        return QuoteService(
            ConsoleDisplay(self.console),
            number_input or ConsoleInput(),
            ShippingRulesValidator(),
            ShippingCostCalculator(),
        )

    def finish(self, result: ServiceResult) -> None:
        """Record how the run ended.

        The user has already seen the outcome through the display, and a
        rejection is a normal ending, so nothing is printed and the exit
        status stays 0 either way.
        """
        if result.ok:
            logger.debug("Quote completed: %s", result.data.get("quote"))
        else:
            code = result.error.code if result.error else "UNKNOWN"
            logger.debug("Quote rejected (%s) in state %s", code, result.state)
