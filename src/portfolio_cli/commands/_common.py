"""Shared helpers for CLI commands — client factory, options."""

from __future__ import annotations

from typing import Annotated

import typer

from portfolio_cli.client.api import PortfolioClient
from portfolio_cli.config.manager import ConfigManager

# Shared Typer option type aliases
SiteOpt = Annotated[
    str | None,
    typer.Option("--site", "-s", help="Site profile"),
]
UrlOpt = Annotated[
    str | None,
    typer.Option("--url", help="Site URL override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format (table, json, yaml, csv)"),
]


def make_client(site: str | None, url: str | None) -> PortfolioClient:
    """Create a PortfolioClient from CLI options, env vars, or config profile."""
    mgr = ConfigManager()
    profile = mgr.resolve_site(profile_name=site, url=url)
    return PortfolioClient(profile)
