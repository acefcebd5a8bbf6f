"""Site commands: list, show, create, update, delete."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from nautobot_cli.client.errors import error_handler
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

app = typer.Typer(name="site", help="Manage DCIM sites.")
console = Console()

_COLUMNS = ["Name", "Slug", "Status", "Region", "Facility", "Devices"]


@app.command("list")
@error_handler
def list_sites(
    filters: FilterOpt = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List sites, following every result page."""
    with make_client(profile, url, token) as client:
        sites = client.sites.list(parse_filters(filters))
        rows = [
            [
                s.name,
                s.slug,
                s.status.label if s.status else None,
                s.region.name if s.region else None,
                s.facility,
                s.device_count,
            ]
            for s in sites
        ]
        output(sites, fmt, columns=_COLUMNS, rows=rows, title="Sites")


@app.command()
@error_handler
def show(
    site_id: Annotated[str, typer.Argument(help="Site ID")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show one site."""
    with make_client(profile, url, token) as client:
        site = client.sites.get(site_id)
        output(site, fmt, kv=True, title=f"Site: {site.name or site_id}")


@app.command()
@error_handler
def create(
    data: DataOpt,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Create sites from a JSON object or list of objects."""
    payload = parse_payload(data)
    if isinstance(payload, dict):
        payload = [payload]
    with make_client(profile, url, token) as client:
        created = client.sites.create(payload)
        rows = [[s.id, s.name, s.slug] for s in created]
        output(created, fmt, columns=["ID", "Name", "Slug"], rows=rows, title="Created sites")


@app.command()
@error_handler
def update(
    data: DataOpt,
    site_id: Annotated[
        str | None,
        typer.Argument(help="Site ID (omit for a bulk update; each item needs an id)"),
    ] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Partially update one site, or several at once."""
    payload = parse_payload(data)
    with make_client(profile, url, token) as client:
        if site_id:
            site = client.sites.update(site_id, payload)
            output(site, fmt, kv=True, title=f"Site: {site.name or site_id}")
            return
        updated = client.sites.update_many(payload)
        rows = [[s.id, s.name, s.slug] for s in updated]
        output(updated, fmt, columns=["ID", "Name", "Slug"], rows=rows, title="Updated sites")


@app.command()
@error_handler
def delete(
    site_id: Annotated[
        str | None,
        typer.Argument(help="Site ID (omit and pass --data for a bulk delete)"),
    ] = None,
    data: Annotated[
        str | None,
        typer.Option("--data", "-d", help='JSON list like [{"id": "..."}] or @file'),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Skip confirmation"),
    ] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Delete one site, or several with --data."""
    if not site_id and not data:
        console.print("[red]Pass a site ID or --data.[/]")
        raise typer.Exit(1)
    label = site_id or "the listed sites"
    if not force:
        from rich.prompt import Confirm

        if not Confirm.ask(f"Delete {label}?"):
            console.print("Cancelled.")
            return
    with make_client(profile, url, token) as client:
        if site_id:
            client.sites.delete(site_id)
        else:
            client.sites.delete_many(parse_payload(data or "[]"))
        console.print(f"[green]Deleted {label}.[/]")
