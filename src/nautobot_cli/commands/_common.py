"""Shared helpers for CLI commands: client factory, options, filter and payload parsing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from nautobot_cli.client.errors import ConfigurationError
from nautobot_cli.client.nautobot import NautobotClient
from nautobot_cli.config.manager import ConfigManager
from nautobot_cli.models.common import OptionalFilter

_console = Console()

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Nautobot profile"),
]
UrlOpt = Annotated[
    str | None,
    typer.Option("--url", help="Nautobot URL override"),
]
TokenOpt = Annotated[
    str | None,
    typer.Option("--token", help="API token override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format (table, json, yaml, csv)"),
]
FilterOpt = Annotated[
    list[str] | None,
    typer.Option("--filter", help="Filter as field=value (repeatable)"),
]
DataOpt = Annotated[
    str,
    typer.Option("--data", "-d", help="JSON payload string or @file path"),
]


def make_client(
    profile: str | None,
    url: str | None,
    token: str | None,
) -> NautobotClient:
    """Create a NautobotClient from CLI options, env vars, or config profile."""
    mgr = ConfigManager()
    resolved = mgr.resolve_profile(profile_name=profile, url=url, token=token)
    if not resolved.token:
        raise ConfigurationError(
            f"No API token configured for {resolved.url}. "
            "Use 'config add --token', set NAUTOBOT_TOKEN or pass --token."
        )
    return NautobotClient(resolved)


def parse_filters(raw: list[str] | None) -> list[OptionalFilter]:
    """Parse ``field=value`` strings; all-digit values are sent as integers."""
    filters: list[OptionalFilter] = []
    for item in raw or []:
        field, sep, value = item.partition("=")
        if not sep or not field:
            _console.print(f"[red]Invalid filter '{item}'. Use field=value.[/]")
            raise typer.Exit(1)
        typed: str | int = int(value) if value.isascii() and value.isdigit() else value
        filters.append(OptionalFilter(field=field, value=typed))
    return filters


def parse_payload(data: str) -> Any:
    """Parse a JSON payload from a string or ``@file`` reference."""
    if data.startswith("@"):
        file_path = Path(data[1:])
        if not file_path.exists():
            _console.print(f"[red]Payload file not found: {file_path}[/]")
            raise typer.Exit(1)
        text = file_path.read_text()
    else:
        text = data
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        _console.print("[red]Invalid JSON payload.[/]")
        raise typer.Exit(1) from None
