"""Locating and reading the optional pkgexpress.toml.

A file named on the command line or in PKGEXPRESS_CONFIG is *explicit*:
if it cannot be read the run stops with an error. A file picked up by
walking up from the working directory is only a convenience, so a broken
one is skipped with a warning and the quote still runs.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, NamedTuple

import click

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "pkgexpress.toml"
CONFIG_ENV_VAR = "PKGEXPRESS_CONFIG"


class ConfigLocation(NamedTuple):
    path: Path
    explicit: bool


def locate_config(
    config_path: str | None = None, start: Path | None = None
) -> ConfigLocation | None:
    """Find the config file for this run, or None.

    Order: *config_path*, then ``$PKGEXPRESS_CONFIG``, then the nearest
    ``pkgexpress.toml`` in *start* (default: cwd) or any parent. A named
    file that does not exist counts as no config.
    """
    named = config_path or os.environ.get(CONFIG_ENV_VAR)
    if named:
        p = Path(named)
        return ConfigLocation(p, explicit=True) if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return ConfigLocation(candidate, explicit=False)
    return None


def read_config(location: ConfigLocation) -> dict[str, Any] | None:
    """Parse the TOML at *location*.

    Returns None for a discovered file that is unreadable or invalid.

    Raises:
        click.ClickException: An explicit file is unreadable or invalid.
    """
    try:
        return tomllib.loads(location.path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        msg = f"Invalid TOML in {location.path}: {exc}"
        if location.explicit:
            raise click.ClickException(msg) from exc
        logger.warning("Ignoring %s", msg)
        return None
