"""Root CLI command for pkgexpress: one interactive shipping quote."""

from __future__ import annotations

import click

from pkgexpress import __version__
from pkgexpress.config.settings import PkgExpressSettings
from pkgexpress.context import AppContext
from pkgexpress.domain.measurements import use_host_locale


@click.command(
    epilog="""\
Examples:

\b
  pkgexpress
  pkgexpress --no-color
  pkgexpress -v --log-json 2> quote.log""",
)
@click.version_option(version=__version__, prog_name="pkgexpress")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
def cli(verbose: bool, log_json: bool, no_color: bool, config_path: str | None) -> None:
    """Estimate the cost of shipping one package with Package Express."""
    use_host_locale()
    # Unset flags stay None so env vars and pkgexpress.toml can supply them.
    settings = PkgExpressSettings.from_cli(
        config_path=config_path,
        verbose=verbose or None,
        log_json=log_json or None,
        no_color=no_color or None,
    )
    app = AppContext(settings)
    app.finish(app.quote_service().process_quote())


def main() -> None:
    """Console script entry point."""
    cli()
