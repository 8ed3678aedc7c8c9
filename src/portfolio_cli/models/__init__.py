"""Pydantic data models for the portfolio projects API."""

from portfolio_cli.models.common import ErrorResponse
from portfolio_cli.models.project import URL_FIELDS, Project, ProjectDraft

__all__ = [
    "ErrorResponse",
    "Project",
    "ProjectDraft",
    "URL_FIELDS",
]
