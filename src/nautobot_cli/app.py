"""Root Typer app: global options, logging setup and command group registration."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.logging import RichHandler

from nautobot_cli import __version__
from nautobot_cli.client.errors import err_console
from nautobot_cli.commands import config_cmd, interface_status, site

app = typer.Typer(
    name="nautobot-cli",
    help="CLI tool for the Nautobot REST API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"nautobot-cli {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Send the package's log records to stderr through Rich."""
    logger = logging.getLogger("nautobot_cli")
    logger.handlers[:] = [
        RichHandler(console=err_console, show_path=False, show_time=verbose),
    ]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests and pagination."),
) -> None:
    """Nautobot CLI: sites, interface status and profiles."""
    setup_logging(verbose)


# Register command groups
app.add_typer(config_cmd.app, name="config")
app.add_typer(site.app, name="site")
app.add_typer(interface_status.app, name="interface-status")


def main() -> None:
    app()
