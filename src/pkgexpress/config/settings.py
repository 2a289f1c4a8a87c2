"""Settings for one pkgexpress run, merged from four sources.

Priority chain (highest to lowest):
  1. CLI flags that were actually given
  2. ``PKGEXPRESS_*`` env vars
  3. ``pkgexpress.toml`` (see :mod:`pkgexpress.config.discovery`)
  4. Code defaults

Only presentation and logging are configurable. Shipping limits, messages,
and the price formula are fixed in :mod:`pkgexpress.domain`.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from pkgexpress.config.discovery import locate_config, read_config

logger = logging.getLogger(__name__)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Serve already-parsed ``pkgexpress.toml`` values to pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._data = data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the TOML keys that name known settings."""
        return {k: v for k, v in self._data.items() if k in self.settings_cls.model_fields}


# Parsed TOML handed to settings_customise_sources during construction.
_tls = threading.local()


def _format_errors(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'settings'}: {err['msg']}"
        for err in exc.errors()
    )


class PkgExpressSettings(BaseSettings):
    """Settings for one pkgexpress invocation, frozen after construction.

    Attributes:
        config_path: The TOML file whose values were applied, or None.
        verbose: DEBUG-level logging to stderr.
        log_json: JSON log lines instead of the console renderer.
        no_color: Disable ANSI styling of user-facing output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PKGEXPRESS_",
        "extra": "ignore",
    }

    config_path: Path | None = None

    verbose: bool = False
    log_json: bool = False
    no_color: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_data", None) or {}),
        )

    @classmethod
    def _build(cls, toml_data: dict[str, Any], **kwargs: Any) -> PkgExpressSettings:
        _tls.toml_data = toml_data
        try:
            return cls(**kwargs)
        finally:
            _tls.toml_data = None

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_from: Path | None = None,
        **cli_flags: Any,
    ) -> PkgExpressSettings:
        """Construct settings from a CLI invocation.

        Flags left at None are dropped so lower-priority sources apply.
        Bad values in a discovered ``pkgexpress.toml`` are skipped with a
        warning; bad values anywhere else stop the run.

        Raises:
            click.ClickException: An explicit config file or an env var
                holds something that is not a valid setting.
        """
        overrides = {k: v for k, v in cli_flags.items() if v is not None}
        try:
            base = cls._build({}, **overrides)
        except ValidationError as exc:
            msg = f"Invalid setting: {_format_errors(exc)}"
            raise click.ClickException(msg) from exc

        location = locate_config(config_path, search_from)
        toml_data = read_config(location) if location else None
        if location is None or toml_data is None:
            return base

        try:
            return cls._build(toml_data, config_path=location.path, **overrides)
        except ValidationError as exc:
            if location.explicit:
                msg = f"Invalid setting in {location.path}: {_format_errors(exc)}"
                raise click.ClickException(msg) from exc
            logger.warning("Ignoring %s: %s", location.path, _format_errors(exc))
            return base
