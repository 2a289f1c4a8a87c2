"""structlog setup for pkgexpress.

stdout belongs to the quote dialogue, so every log line goes to stderr
(or the stream given). Only loggers under ``pkgexpress`` are raised to
DEBUG by ``--verbose``; everything else stays at WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

LOGGER_NAMESPACE = "pkgexpress"


def _processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _renderer(*, log_json: bool, stream: IO[str]) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    isatty = getattr(stream, "isatty", None)
    return structlog.dev.ConsoleRenderer(colors=bool(isatty and isatty()))


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """Route stdlib and structlog records through one stderr handler.

    Safe to call repeatedly: the root handler is replaced, never stacked.

    Args:
        verbose: DEBUG for the ``pkgexpress`` namespace instead of WARNING.
        log_json: One JSON object per line instead of the console renderer.
        stream: Target stream (default: ``sys.stderr`` at call time).
    """
    target = stream if stream is not None else sys.stderr
    shared = _processors()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(target)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json=log_json, stream=target),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAMESPACE).setLevel(logging.DEBUG if verbose else logging.WARNING)
