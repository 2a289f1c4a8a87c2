"""Shared pytest fixtures and test doubles for pkgexpress tests."""

from __future__ import annotations

import locale
import logging
from collections.abc import Generator, Iterable
from io import StringIO
from pathlib import Path

import pytest
from click.testing import CliRunner
from rich.console import Console

from pkgexpress.config.discovery import CONFIG_ENV_VAR
from pkgexpress.domain.pricing import ShippingCostCalculator
from pkgexpress.domain.rules import ShippingRulesValidator
from pkgexpress.output.console import create_console
from pkgexpress.services.quote import QuoteService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def buffer_console() -> Console:
    """Colorless Console rendering into a StringIO buffer."""
    return create_console(file=StringIO(), no_color=True, width=120)


def rendered(console: Console) -> str:
    """Text written so far to a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory, C locale, no PKGEXPRESS_* env vars.

    Keeps a developer's own pkgexpress.toml or environment from leaking
    into settings resolution.
    """
    for name in ("VERBOSE", "LOG_JSON", "NO_COLOR"):
        monkeypatch.delenv(f"PKGEXPRESS_{name}", raising=False)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setenv("LC_ALL", "C")
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_locale() -> Generator[None]:
    """Undo LC_NUMERIC changes made by the CLI during a test."""
    saved = locale.setlocale(locale.LC_NUMERIC)
    yield
    locale.setlocale(locale.LC_NUMERIC, saved)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pe = logging.getLogger("pkgexpress")
    pe_level = pe.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pe.setLevel(pe_level)


# ---------------------------------------------------------------------------
# Test doubles for the QuoteService collaborators
# ---------------------------------------------------------------------------


class ScriptedInput:
    """NumberInput that answers prompts from a fixed list of numbers."""

    def __init__(self, answers: Iterable[float]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def get_number(self, prompt: str) -> float:
        self.prompts.append(prompt)
        if not self._answers:
            raise AssertionError(f"Unexpected prompt: {prompt}")
        return self._answers.pop(0)


class RecordingDisplay:
    """Display that records ``(kind, value)`` pairs instead of printing."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []

    def show_message(self, message: str) -> None:
        self.calls.append(("message", message))

    def show_error(self, error: str) -> None:
        self.calls.append(("error", error))

    def show_quote(self, amount: float) -> None:
        self.calls.append(("quote", amount))

    def of_kind(self, kind: str) -> list[object]:
        return [value for k, value in self.calls if k == kind]


def make_service(
    answers: Iterable[float],
) -> tuple[QuoteService, RecordingDisplay, ScriptedInput]:
    """Build a QuoteService over scripted input and a recording display."""
    display = RecordingDisplay()
    number_input = ScriptedInput(answers)
    svc = QuoteService(display, number_input, ShippingRulesValidator(), ShippingCostCalculator())
    return svc, display, number_input
