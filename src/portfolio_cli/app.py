"""Root Typer app — global options and command group registration."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from portfolio_cli import __version__
from portfolio_cli.commands import config_cmd, project

app = typer.Typer(
    name="portfolio-cli",
    help="Manage the projects showcase of a portfolio site.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"portfolio-cli {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests and cache activity."),
) -> None:
    """Portfolio CLI — list, create, edit and delete showcased projects."""
    configure_logging(verbose)


# Register command groups
app.add_typer(config_cmd.app, name="config")
app.add_typer(project.app, name="project")


def main() -> None:
    app()
