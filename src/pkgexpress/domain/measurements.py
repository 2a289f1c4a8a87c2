"""Parsing of user-entered measurements in the host's numeric format."""

from __future__ import annotations

import locale
import math


def _group_separator() -> str:
    conv = locale.localeconv()
    sep = str(conv["thousands_sep"])
    # The C locale has no grouping; accept "," there like an English host.
    if not sep and conv["decimal_point"] == ".":
        return ","
    return sep


def parse_number(text: str | None) -> float | None:
    """Parse one line of user input as a real number.

    Group separators and the decimal point follow the current
    ``LC_NUMERIC`` locale (``1,000.5`` on an English host, ``1.000,5`` on
    a German one). Returns None when the text is not a finite number.
    Surrounding whitespace is ignored; empty input, ``1_000``, ``nan``
    and ``inf`` are rejected.
    """
    if text is None:
        return None
    stripped = text.strip()
    if not stripped or "_" in stripped:
        return None
    sep = _group_separator()
    if sep:
        stripped = stripped.replace(sep, "")
    try:
        value = float(locale.delocalize(stripped))
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def use_host_locale() -> None:
    """Adopt the user's numeric locale for parsing (once, at start-up).

    An unknown or broken locale in the environment leaves the C locale in
    place.
    """
    try:
        locale.setlocale(locale.LC_NUMERIC, "")
    except locale.Error:
        locale.setlocale(locale.LC_NUMERIC, "C")
