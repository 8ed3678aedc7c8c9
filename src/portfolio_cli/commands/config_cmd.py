"""Config commands — manage site profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from portfolio_cli.client.errors import error_handler
from portfolio_cli.config.manager import ConfigManager
from portfolio_cli.config.models import SiteProfile
from portfolio_cli.output.formatter import output

app = typer.Typer(name="config", help="Manage site profiles and CLI configuration.")
console = Console()


def _get_manager() -> ConfigManager:
    return ConfigManager()


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    url: Annotated[str, typer.Option("--url", "-u", help="Site base URL")],
    timeout: Annotated[float, typer.Option("--timeout", help="Request timeout in seconds")] = 30.0,
    no_verify_ssl: Annotated[bool, typer.Option("--no-verify-ssl", help="Disable SSL verification")] = False,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add a site profile."""
    mgr = _get_manager()
    profile = SiteProfile(
        name=name,
        url=url,
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
        console.print("[yellow]No profiles configured. Run 'portfolio-cli config add' to get started.[/]")
        return

    default = mgr.config.default_profile
    columns = ["Name", "URL", "Verify SSL", "Default"]
    rows = [
        [name, p.url, "yes" if p.verify_ssl else "no", "*" if name == default else ""]
        for name, p in profiles.items()
    ]
    output(
        {"profiles": [p.model_dump() for p in profiles.values()]},
        fmt,
        columns=columns,
        rows=rows,
        title="Site Profiles",
    )


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
    output(profile.model_dump(), fmt, kv=True, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default site profile."""
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
    """Check that the site answers the projects endpoint."""
    from portfolio_cli.client.api import PortfolioClient

    mgr = _get_manager()
    profile = mgr.resolve_site(profile_name=name)
    console.print(f"Testing connection to [bold]{profile.url}[/]...")

    with PortfolioClient(profile) as client:
        projects = client.list_projects()
        console.print(f"[green]Connected![/] {len(projects)} project(s) on the site.")


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove a site profile."""
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
