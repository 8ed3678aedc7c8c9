"""Project commands.

list, show, create, edit, delete, open.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

import typer
from rich.console import Console
from rich.live import Live
from rich.prompt import Confirm, Prompt

from portfolio_cli.cache import QueryCache, project_key
from portfolio_cli.client.api import PortfolioClient
from portfolio_cli.client.errors import FormValidationError, err_console, error_handler
from portfolio_cli.commands._common import FormatOpt, SiteOpt, UrlOpt, make_client
from portfolio_cli.models.project import Project
from portfolio_cli.notify import ConsoleNotifier
from portfolio_cli.output.cards import project_card, render_snapshot
from portfolio_cli.output.formatter import output
from portfolio_cli.output.tables import PROJECT_COLUMNS, project_row
from portfolio_cli.views.form import ProjectForm
from portfolio_cli.views.listing import ListState, ProjectListView

app = typer.Typer(name="project", help="Manage showcased projects.")
console = Console()

TechOpt = Annotated[
    list[str] | None,
    typer.Option("--tech", "-T", help="Technology label (repeatable)"),
]
GithubOpt = Annotated[str | None, typer.Option("--github-url", help="Source code URL")]
LiveOpt = Annotated[str | None, typer.Option("--live-url", help="Live demo URL")]
DownloadOpt = Annotated[str | None, typer.Option("--download-url", help="Download URL")]

FIELD_LABELS = {
    "title": "Project title",
    "description": "Description",
    "github_url": "GitHub URL (optional)",
    "live_url": "Live demo URL (optional)",
    "download_url": "Download URL (optional)",
}


class LinkKind(str, Enum):
    github = "github"
    live = "live"
    download = "download"


def _list_view(client: PortfolioClient) -> ProjectListView:
    return ProjectListView(client, QueryCache(), ConsoleNotifier(console), Confirm.ask)


def _fetch_project(view: ProjectListView, project_id: str) -> Project:
    project: Project = view.cache.fetch(
        project_key(project_id), lambda: view.client.get_project(project_id),
    )
    return project


def _prompt_technologies(form: ProjectForm) -> None:
    console.print("[dim]Technologies: Enter adds one, -Name removes one, an empty line finishes.[/]")
    if form.tags.tags:
        console.print(f"  [cyan]{', '.join(form.tags.tags)}[/]")
    while True:
        form.tags.buffer = Prompt.ask("  Technology", default="", show_default=False)
        entry = form.tags.buffer.strip()
        if not entry:
            break
        if entry.startswith("-"):
            form.tags.buffer = ""
            label = entry[1:].strip()
            if not form.tags.remove(label):
                console.print(f"  [yellow]'{label}' is not listed.[/]")
            continue
        before = len(form.tags)
        form.tags.handle_key("enter")
        if len(form.tags) == before:
            console.print(f"  [yellow]'{form.tags.buffer.strip()}' is already listed.[/]")
            form.tags.buffer = ""
    if form.tags.tags:
        console.print(f"  [cyan]{', '.join(form.tags.tags)}[/]")


def _prompt_fields(form: ProjectForm, names: list[str]) -> None:
    for name in names:
        current = form.values[name]
        form.set_value(
            name,
            Prompt.ask(FIELD_LABELS[name], default=current, show_default=bool(current)),
        )


def _apply_options(
    form: ProjectForm,
    *,
    title: str | None,
    description: str | None,
    tech: list[str] | None,
    github_url: str | None,
    live_url: str | None,
    download_url: str | None,
) -> None:
    given = {
        "title": title,
        "description": description,
        "github_url": github_url,
        "live_url": live_url,
        "download_url": download_url,
    }
    for name, value in given.items():
        if value is not None:
            form.set_value(name, value)
    for label in tech or []:
        form.tags.add(label)


def _run_form(form: ProjectForm, *, interactive: bool) -> Project:
    """Submit until the site accepts the draft, re-prompting when interactive."""
    console.print(f"[bold]{form.heading}[/]")
    while True:
        with console.status(form.submit_label):
            accepted = form.submit()
        if accepted and form.result is not None:
            return form.result
        if form.field_errors:
            for name, message in form.field_errors.items():
                err_console.print(f"[red]{FIELD_LABELS.get(name, name)}: {message}[/]")
            if not interactive:
                raise FormValidationError(form.field_errors)
            _prompt_fields(form, [n for n in FIELD_LABELS if n in form.field_errors])
            continue
        # Request failed; everything entered is still on the form
        if not interactive or not Confirm.ask("Try again?", default=True):
            raise typer.Exit(1)


@app.command("list")
@error_handler
def list_projects(
    site: SiteOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List all projects, in the order the site returns them."""
    with make_client(site, url) as client:
        view = _list_view(client)
        if fmt == "table":
            with Live(console=console, transient=True) as live:
                view.on_change = lambda snapshot: live.update(render_snapshot(snapshot))
                snapshot = view.load_projects()
            view.on_change = None
        else:
            snapshot = view.load_projects()
        view.close()

    if snapshot.state is ListState.ERROR:
        err_console.print(f"[red]{snapshot.message}[/]")
        raise typer.Exit(1)
    if fmt == "table":
        console.print(render_snapshot(snapshot))
        return
    output(
        list(snapshot.projects),
        fmt,
        columns=PROJECT_COLUMNS,
        rows=[project_row(p) for p in snapshot.projects],
        title="Projects",
    )


@app.command()
@error_handler
def show(
    project_id: Annotated[str, typer.Argument(help="Project ID")],
    site: SiteOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show one project."""
    with make_client(site, url) as client:
        project = client.get_project(project_id)
    if fmt == "table":
        console.print(project_card(project))
    else:
        output(project, fmt, columns=PROJECT_COLUMNS, rows=[project_row(project)])


@app.command()
@error_handler
def create(
    title: Annotated[str | None, typer.Option("--title", "-t", help="Project title")] = None,
    description: Annotated[
        str | None,
        typer.Option("--description", "-d", help="Project description"),
    ] = None,
    tech: TechOpt = None,
    github_url: GithubOpt = None,
    live_url: LiveOpt = None,
    download_url: DownloadOpt = None,
    site: SiteOpt = None,
    url: UrlOpt = None,
) -> None:
    """Add a new project. Prompts for anything required that is missing."""
    with make_client(site, url) as client:
        view = _list_view(client)
        form = view.begin_create()
        _apply_options(
            form,
            title=title,
            description=description,
            tech=tech,
            github_url=github_url,
            live_url=live_url,
            download_url=download_url,
        )
        interactive = title is None or description is None
        if interactive:
            _prompt_fields(form, [n for n in ("title", "description") if not form.values[n]])
            if not tech:
                _prompt_technologies(form)
        project = _run_form(form, interactive=interactive)
        view.close()
    console.print(project_card(project))


@app.command()
@error_handler
def edit(
    project_id: Annotated[str, typer.Argument(help="Project ID")],
    title: Annotated[str | None, typer.Option("--title", "-t", help="New title")] = None,
    description: Annotated[
        str | None,
        typer.Option("--description", "-d", help="New description"),
    ] = None,
    tech: TechOpt = None,
    remove_tech: Annotated[
        list[str] | None,
        typer.Option("--remove-tech", help="Technology label to drop (repeatable)"),
    ] = None,
    github_url: GithubOpt = None,
    live_url: LiveOpt = None,
    download_url: DownloadOpt = None,
    interactive: Annotated[
        bool,
        typer.Option("--interactive", "-i", help="Prompt for every field"),
    ] = False,
    site: SiteOpt = None,
    url: UrlOpt = None,
) -> None:
    """Edit a project. The complete project is sent, not just the changes."""
    with make_client(site, url) as client:
        view = _list_view(client)
        form = view.begin_edit(_fetch_project(view, project_id))
        _apply_options(
            form,
            title=title,
            description=description,
            tech=tech,
            github_url=github_url,
            live_url=live_url,
            download_url=download_url,
        )
        for label in remove_tech or []:
            form.tags.remove(label)
        if interactive:
            _prompt_fields(form, list(FIELD_LABELS))
            _prompt_technologies(form)
        project = _run_form(form, interactive=interactive)
        view.close()
    console.print(project_card(project))


@app.command()
@error_handler
def delete(
    project_id: Annotated[str, typer.Argument(help="Project ID")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    site: SiteOpt = None,
    url: UrlOpt = None,
) -> None:
    """Delete a project. There is no undo."""
    with make_client(site, url) as client:
        view = _list_view(client)
        project = _fetch_project(view, project_id)
        asked: list[bool] = []

        def confirm(message: str) -> bool:
            answer = force or Confirm.ask(message)
            asked.append(answer)
            return answer

        view.confirm = confirm
        deleted = view.delete_project(project)
        view.close()
    if deleted:
        return
    if asked and not asked[-1]:
        console.print("Cancelled.")
        return
    raise typer.Exit(1)


@app.command("open")
@error_handler
def open_link(
    project_id: Annotated[str, typer.Argument(help="Project ID")],
    link: Annotated[
        LinkKind,
        typer.Option("--link", "-l", help="Which link to open"),
    ] = LinkKind.live,
    site: SiteOpt = None,
    url: UrlOpt = None,
) -> None:
    """Open a project's code, live demo or download link in the browser."""
    with make_client(site, url) as client:
        project = client.get_project(project_id)
    target = project.links().get(link.value)
    if not target:
        err_console.print(f"[red]Project '{project.title}' has no {link.value} link.[/]")
        raise typer.Exit(1)
    console.print(f"Opening {target}")
    typer.launch(target)
