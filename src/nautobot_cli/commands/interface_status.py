"""Interface status commands (interfaces-telemetry plugin).

Records are addressed by a slug built from device and interface names, for
example ``r2__ethernet1``.
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from nautobot_cli.client.errors import PatchRequestError, error_handler
from nautobot_cli.commands._common import (
    DataOpt,
    FilterOpt,
    FormatOpt,
    ProfileOpt,
    TokenOpt,
    UrlOpt,
    make_client,
    parse_filters,
    parse_payload,
)
from nautobot_cli.output.formatter import output

app = typer.Typer(name="interface-status", help="Manage interface status records.")
console = Console()

SlugArg = Annotated[str, typer.Argument(help="Interface status slug, e.g. r2__ethernet1")]


@app.command("list")
@error_handler
def list_statuses(
    filters: FilterOpt = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List interface status records, following every result page."""
    with make_client(profile, url, token) as client:
        records = client.interfaces_status.list(parse_filters(filters))
        columns = ["Device", "Interface", "Status", "Last Updated"]
        rows = [
            [r.device_name, r.interface_name, r.interface_status, r.last_updated]
            for r in records
        ]
        output(records, fmt, columns=columns, rows=rows, title="Interface Status")


@app.command()
@error_handler
def show(
    slug: SlugArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show one interface status record."""
    with make_client(profile, url, token) as client:
        record = client.interfaces_status.get(slug)
        output(record, fmt, kv=True, title=f"Interface status: {slug}")


@app.command()
@error_handler
def create(
    data: DataOpt,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Create interface status records from a JSON object or list."""
    payload = parse_payload(data)
    if isinstance(payload, dict):
        payload = [payload]
    with make_client(profile, url, token) as client:
        created = client.interfaces_status.create(payload)
        columns = ["ID", "Device", "Interface", "Status"]
        rows = [
            [r.id, r.device_name, r.interface_name, r.interface_status]
            for r in created
        ]
        output(created, fmt, columns=columns, rows=rows, title="Created interface status")


@app.command()
@error_handler
def update(
    slug: SlugArg,
    data: DataOpt,
    create_missing: Annotated[
        bool,
        typer.Option(
            "--create-missing",
            help="Create the record when the API reports it does not exist",
        ),
    ] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Partially update one interface status record."""
    payload = parse_payload(data)
    with make_client(profile, url, token) as client:
        try:
            record = client.interfaces_status.update(slug, payload)
        except PatchRequestError as exc:
            if not (create_missing and exc.detail_not_found):
                raise
            console.print(f"[yellow]'{slug}' not found, creating it.[/]")
            record = client.interfaces_status.create([payload])[0]
        output(record, fmt, kv=True, title=f"Interface status: {slug}")


@app.command()
@error_handler
def delete(
    slug: SlugArg,
    force: Annotated[
        bool,
        typer.Option("--force", help="Skip confirmation"),
    ] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Delete one interface status record."""
    if not force:
        from rich.prompt import Confirm

        if not Confirm.ask(f"Delete interface status {slug}?"):
            console.print("Cancelled.")
            return
    with make_client(profile, url, token) as client:
        client.interfaces_status.delete(slug)
        console.print(f"[green]Interface status '{slug}' deleted.[/]")
