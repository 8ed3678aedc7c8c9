"""Terminal-independent state for the projects list and edit form."""

from portfolio_cli.views.form import FormMode, FormState, ProjectForm
from portfolio_cli.views.listing import ListSnapshot, ListState, ProjectListView
from portfolio_cli.views.tags import TagEditor

__all__ = [
    "FormMode",
    "FormState",
    "ListSnapshot",
    "ListState",
    "ProjectForm",
    "ProjectListView",
    "TagEditor",
]
