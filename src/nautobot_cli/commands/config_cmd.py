"""Config commands: manage Nautobot profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt

from nautobot_cli.client.errors import error_handler
from nautobot_cli.config.manager import ConfigManager
from nautobot_cli.config.models import NautobotProfile
from nautobot_cli.output.formatter import output

app = typer.Typer(name="config", help="Manage Nautobot profiles and CLI configuration.")
console = Console()


def _get_manager() -> ConfigManager:
    return ConfigManager()


@app.command()
@error_handler
def init() -> None:
    """Interactive setup wizard: create your first Nautobot profile."""
    mgr = _get_manager()
    console.print("[bold]Nautobot CLI Setup Wizard[/]\n")

    name = Prompt.ask("Profile name", default="default")
    url = Prompt.ask("Nautobot URL (e.g. https://nautobot.example.com)")
    token = Prompt.ask("API Token", default=None)
    verify_ssl = Confirm.ask("Verify SSL certificates?", default=True)

    profile = NautobotProfile(
        name=name,
        url=url.rstrip("/"),
        token=token if token else None,
        verify_ssl=verify_ssl,
    )
    mgr.add_profile(profile)
    console.print(f"\n[green]Profile '{name}' saved and set as default.[/]")
    console.print(f"Config file: {mgr.config_path}")


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    url: Annotated[str, typer.Option("--url", "-u", help="Nautobot URL")],
    token: Annotated[Optional[str], typer.Option("--token", "-t", help="API token")] = None,
    offset: Annotated[int, typer.Option("--offset", help="Offset of the first listed record")] = 0,
    limit: Annotated[int, typer.Option("--limit", help="Page size (0 = server default)")] = 0,
    timeout: Annotated[float, typer.Option("--timeout", help="Request timeout in seconds")] = 10.0,
    no_verify_ssl: Annotated[bool, typer.Option("--no-verify-ssl", help="Disable SSL verification")] = False,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add a Nautobot profile."""
    mgr = _get_manager()
    profile = NautobotProfile(
        name=name,
        url=url.rstrip("/"),
        token=token,
        offset=offset,
        limit=limit,
        timeout=timeout,
        verify_ssl=not no_verify_ssl,
    )
    mgr.add_profile(profile)
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List all configured profiles."""
    mgr = _get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'nautobot-cli config init' to get started.[/]")
        return

    default = mgr.config.default_profile
    columns = ["Name", "URL", "Token", "Limit", "Default"]
    rows = []
    for name, p in profiles.items():
        has_token = "yes" if p.token else "no"
        is_default = "*" if name == default else ""
        rows.append([name, p.url, has_token, p.limit or "", is_default])

    output(
        {"profiles": [_masked(p) for p in profiles.values()]},
        fmt,
        columns=columns,
        rows=rows,
        title="Nautobot Profiles",
    )


def _masked(profile: NautobotProfile) -> dict:
    data = profile.model_dump(exclude_none=True)
    if "token" in data:
        data["token"] = data["token"][:8] + "..." if len(data["token"]) > 8 else "***"
    return data


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show profile details."""
    mgr = _get_manager()
    profile = mgr.get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)
    output(_masked(profile), fmt, kv=True, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default Nautobot profile."""
    mgr = _get_manager()
    if mgr.set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command()
@error_handler
def test(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (uses default if omitted)")] = None,
) -> None:
    """Test connectivity to Nautobot."""
    from nautobot_cli.client.nautobot import NautobotClient

    mgr = _get_manager()
    profile = mgr.resolve_profile(profile_name=name)
    console.print(f"Testing connection to [bold]{profile.url}[/]...")

    with NautobotClient(profile) as client:
        info = client.status()
        console.print(
            f"[green]Connected![/] Nautobot v{info.get('nautobot-version', '?')}"
        )


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove a Nautobot profile."""
    mgr = _get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force:
        if not Confirm.ask(f"Remove profile '{name}'?"):
            console.print("Cancelled.")
            return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
