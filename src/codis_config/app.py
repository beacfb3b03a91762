from __future__ import annotations

from pathlib import Path

import typer

from codis_config.cli.action import action_app
from codis_config.config import GLOBAL_OPTIONS
from codis_config.logging_utils import setup_rich_logging
from codis_config.version import __version__

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="codis-config: administration CLI for the Codis dashboard.",
)


@app.callback()
def main(
    config: Path | None = typer.Option(
        None,
        "-c",
        "--config",
        help="Config file (key=value). Defaults to $CODIS_CONFIG_FILE or config.ini.",
        dir_okay=False,
    ),
    dashboard: str | None = typer.Option(
        None,
        "--dashboard",
        help="Dashboard address (host:port), overrides config and environment.",
    ),
    verbose: int = typer.Option(0, "-v", "--verbose", count=True, help="Show debug logs."),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only show warnings and errors."),
    pretty: bool = typer.Option(False, "--pretty", help="Indent JSON output."),
) -> None:
    GLOBAL_OPTIONS.verbose = -1 if quiet else verbose
    GLOBAL_OPTIONS.pretty = pretty
    GLOBAL_OPTIONS.config_path = config
    GLOBAL_OPTIONS.dashboard_addr = dashboard
    setup_rich_logging(GLOBAL_OPTIONS.verbose)


@app.command()
def version() -> None:
    """Print version and exit."""
    typer.echo(__version__)


# Subcommands
app.add_typer(action_app, name="action")
