"""Transient user notifications."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console


class Notifier(Protocol):
    def notify(self, title: str, *, destructive: bool = False) -> None: ...


class ConsoleNotifier:
    """Print notifications to a Rich console: green for success, red for failures."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def notify(self, title: str, *, destructive: bool = False) -> None:
        style = "bold red" if destructive else "green"
        self.console.print(f"[{style}]{title}[/]")

