"""Project edit form: field state, validation and create/update submission."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import ValidationError

from portfolio_cli.cache import PROJECTS_KEY, QueryCache, project_key
from portfolio_cli.client.api import PortfolioClient
from portfolio_cli.client.errors import FormValidationError, PortfolioCLIError
from portfolio_cli.models.project import URL_FIELDS, Project, ProjectDraft
from portfolio_cli.notify import Notifier
from portfolio_cli.views.tags import TagEditor

logger = logging.getLogger(__name__)

FIELDS = ("title", "description", *URL_FIELDS)


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class FormState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    CLOSED = "closed"


class ProjectForm:
    """A single project draft being created or edited.

    Text fields live in ``values``; technologies live in ``tags`` and are
    merged into the draft only when it is built for submission.
    """

    def __init__(
        self,
        mode: FormMode,
        client: PortfolioClient,
        cache: QueryCache,
        notifier: Notifier,
        project: Project | None = None,
    ) -> None:
        if mode is FormMode.EDIT and project is None:
            raise ValueError("Editing requires an existing project")
        if mode is FormMode.CREATE and project is not None:
            raise ValueError("A new project form starts empty")
        self.mode = mode
        self.client = client
        self.cache = cache
        self.notifier = notifier
        self.project = project
        self.state = FormState.IDLE
        self.field_errors: dict[str, str] = {}
        self.result: Project | None = None
        self.values: dict[str, str] = {
            name: (getattr(project, name) or "") if project else "" for name in FIELDS
        }
        self.tags = TagEditor(project.technologies if project else ())

    @property
    def heading(self) -> str:
        return "Add New Project" if self.mode is FormMode.CREATE else "Edit Project"

    @property
    def submit_label(self) -> str:
        if self.state is FormState.SUBMITTING:
            return "Saving..."
        return "Create Project" if self.mode is FormMode.CREATE else "Update Project"

    @property
    def is_open(self) -> bool:
        return self.state is not FormState.CLOSED

    def set_value(self, name: str, text: str) -> None:
        if name not in FIELDS:
            raise ValueError(f"Unknown project field: {name}")
        self.values[name] = text

    def build_draft(self) -> ProjectDraft:
        """Validate the current values, with the tag list merged in."""
        try:
            return ProjectDraft(**self.values, technologies=self.tags.tags)
        except ValidationError as exc:
            errors: dict[str, str] = {}
            for err in exc.errors():
                name = str(err["loc"][0]) if err["loc"] else "__root__"
                errors.setdefault(name, err["msg"])
            raise FormValidationError(errors) from exc

    def close(self) -> None:
        self.state = FormState.CLOSED

    def submit(self) -> bool:
        """Validate and send the draft. Returns ``True`` once the site accepted it."""
        if self.state in (FormState.SUBMITTING, FormState.CLOSED):
            logger.debug("Ignoring submit while %s", self.state.value)
            return False

        self.state = FormState.VALIDATING
        self.field_errors = {}
        try:
            draft = self.build_draft()
        except FormValidationError as exc:
            self.field_errors = exc.field_errors
            self.state = FormState.IDLE
            return False

        self.state = FormState.SUBMITTING
        verb = "create" if self.mode is FormMode.CREATE else "update"
        try:
            if self.project is None:
                saved = self.client.create_project(draft)
            else:
                saved = self.client.update_project(self.project.id, draft)
        except PortfolioCLIError as exc:
            logger.warning("Failed to %s project: %s", verb, exc)
            if self.state is FormState.SUBMITTING:
                self.state = FormState.IDLE
                self.notifier.notify(f"Failed to {verb} project", destructive=True)
            return False

        self.cache.invalidate(PROJECTS_KEY)
        if self.project is not None:
            self.cache.invalidate(project_key(self.project.id))
        self.result = saved
        # Closed mid-request: keep the invalidation, skip the UI updates
        if self.state is FormState.SUBMITTING:
            self.notifier.notify(f"Project {verb}d successfully!")
            self.state = FormState.CLOSED
        return True
