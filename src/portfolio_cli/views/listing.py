"""Project list view: loading, deleting, and entry into the edit form."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from portfolio_cli.cache import PROJECTS_KEY, QueryCache, QueryKey
from portfolio_cli.client.api import PortfolioClient
from portfolio_cli.client.errors import PortfolioCLIError
from portfolio_cli.models.project import Project
from portfolio_cli.notify import Notifier
from portfolio_cli.views.form import FormMode, ProjectForm

logger = logging.getLogger(__name__)

SKELETON_COUNT = 2
LOAD_FAILED_MESSAGE = "Failed to load projects. Please try again."

Confirm = Callable[[str], bool]
SnapshotListener = Callable[["ListSnapshot"], None]


class ListState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    READY = "ready"


@dataclass(frozen=True)
class ListSnapshot:
    """What the list should show right now."""

    state: ListState
    projects: tuple[Project, ...] = ()
    message: str | None = None

    @property
    def skeletons(self) -> int:
        return SKELETON_COUNT if self.state is ListState.LOADING else 0


class ProjectListView:
    """The projects collection plus the create/edit/delete entry points.

    ``confirm`` is asked a yes/no question before every delete.
    ``on_change`` (optional) receives each new snapshot, including the
    ``LOADING`` one emitted before a fetch starts.
    """

    def __init__(
        self,
        client: PortfolioClient,
        cache: QueryCache,
        notifier: Notifier,
        confirm: Confirm,
        on_change: SnapshotListener | None = None,
    ) -> None:
        self.client = client
        self.cache = cache
        self.notifier = notifier
        self.confirm = confirm
        self.on_change = on_change
        self.snapshot = ListSnapshot(ListState.LOADING)
        self.form: ProjectForm | None = None
        self.needs_refresh = True
        self._deleting: set[str] = set()
        self._unsubscribe = cache.subscribe(PROJECTS_KEY, self._invalidated)

    def _invalidated(self, key: QueryKey) -> None:
        self.needs_refresh = True

    def _publish(self, snapshot: ListSnapshot) -> ListSnapshot:
        self.snapshot = snapshot
        if self.on_change is not None:
            self.on_change(snapshot)
        return snapshot

    def close(self) -> None:
        self._unsubscribe()

    @property
    def projects(self) -> list[Project]:
        return list(self.snapshot.projects)

    def load_projects(self) -> ListSnapshot:
        """Read the collection through the cache. Failures are not retried."""
        self.needs_refresh = False
        self._publish(ListSnapshot(ListState.LOADING))
        try:
            projects = self.cache.fetch(PROJECTS_KEY, self.client.list_projects)
        except PortfolioCLIError as exc:
            logger.warning("Loading projects failed: %s", exc)
            return self._publish(
                ListSnapshot(ListState.ERROR, message=LOAD_FAILED_MESSAGE)
            )
        state = ListState.READY if projects else ListState.EMPTY
        return self._publish(ListSnapshot(state, tuple(projects)))

    def refresh(self) -> ListSnapshot:
        """Reload only if the collection was invalidated since the last load."""
        if self.needs_refresh:
            return self.load_projects()
        return self.snapshot

    def is_deleting(self, project_id: str) -> bool:
        return project_id in self._deleting

    def delete_project(self, project: Project) -> bool:
        """Delete after confirmation. Returns ``True`` if the site deleted it."""
        if self.is_deleting(project.id):
            return False
        if not self.confirm(f'Are you sure you want to delete "{project.title}"?'):
            logger.debug("Delete of %s declined", project.id)
            return False
        self._deleting.add(project.id)
        try:
            self.client.delete_project(project.id)
        except PortfolioCLIError as exc:
            logger.warning("Deleting project %s failed: %s", project.id, exc)
            self.notifier.notify("Failed to delete project", destructive=True)
            return False
        finally:
            self._deleting.discard(project.id)
        self.cache.invalidate(PROJECTS_KEY)
        self.notifier.notify("Project deleted successfully!")
        return True

    def begin_create(self) -> ProjectForm:
        self.form = ProjectForm(FormMode.CREATE, self.client, self.cache, self.notifier)
        return self.form

    def begin_edit(self, project: Project) -> ProjectForm:
        self.form = ProjectForm(
            FormMode.EDIT,
            self.client,
            self.cache,
            self.notifier,
            project=project.model_copy(deep=True),
        )
        return self.form

    def empty_state_action(self) -> ProjectForm:
        """The "Create Your First Project" button."""
        return self.begin_create()
