"""Card-style rendering of projects and list view states."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from portfolio_cli.models.project import Project
from portfolio_cli.views.listing import ListSnapshot, ListState

LINK_LABELS = {"github": "Code", "live": "Live Demo", "download": "Download"}


def project_card(project: Project) -> Panel:
    body = Text()
    body.append(project.description)
    if project.created_display:
        body.append(f"\n\n{project.created_display}", style="dim")
    if project.technologies:
        body.append("\n\n")
        for tech in project.technologies:
            body.append(f" {tech} ", style="bold cyan on grey23")
            body.append(" ")
    for kind, url in project.links().items():
        body.append(f"\n{LINK_LABELS[kind]}: ", style="bold")
        body.append(url, style=f"link {url}")
    return Panel(
        body,
        title=f"[bold]{project.title}[/]",
        subtitle=f"[dim]{project.id}[/]",
        title_align="left",
        subtitle_align="right",
    )


def skeleton_card() -> Panel:
    bars = Text("\n".join(["█" * 24, "█" * 40, "█" * 28, "", "████ ██████"]), style="grey23")
    return Panel(bars)


def empty_state() -> Panel:
    return Panel(
        Text.assemble(
            ("No Projects Yet\n\n", "bold"),
            ("Start showcasing your work by adding your first project.\n", "dim"),
            ("Create Your First Project: ", ""),
            ("portfolio-cli project create", "bold cyan"),
        ),
        expand=False,
    )


def render_snapshot(snapshot: ListSnapshot) -> RenderableType:
    """Renderable for one list view state."""
    if snapshot.state is ListState.LOADING:
        return Group(*(skeleton_card() for _ in range(snapshot.skeletons)))
    if snapshot.state is ListState.ERROR:
        return Text(snapshot.message or "", style="red")
    if snapshot.state is ListState.EMPTY:
        return empty_state()
    return Group(*(project_card(p) for p in snapshot.projects))
