"""Project data models.

``Project`` is what the site returns; ``ProjectDraft`` is what the client
sends on create and update. Wire names are camelCase (``githubUrl``,
``createdAt``); Python attributes are snake_case.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import (
    AliasChoices,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

URL_FIELDS = ("github_url", "live_url", "download_url")

_url_adapter = TypeAdapter(AnyUrl)


def _wire(name: str, camel: str) -> Any:
    return Field(
        default=None,
        validation_alias=AliasChoices(camel, name),
        serialization_alias=camel,
    )


class Project(BaseModel):
    """A persisted project as returned by the site."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str
    technologies: list[str] = Field(default_factory=list)
    download_url: str | None = _wire("download_url", "downloadUrl")
    github_url: str | None = _wire("github_url", "githubUrl")
    live_url: str | None = _wire("live_url", "liveUrl")
    created_at: datetime | None = _wire("created_at", "createdAt")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        # Some backends use serial integer keys
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("technologies", mode="before")
    @classmethod
    def none_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def created_display(self) -> str:
        """Creation date as ``Month D, YYYY``, or ``""`` when unknown."""
        if self.created_at is None:
            return ""
        dt = self.created_at
        return f"{dt:%B} {dt.day}, {dt.year}"

    def links(self) -> dict[str, str]:
        """Present links keyed by kind (``github``, ``live``, ``download``)."""
        found = {
            "github": self.github_url,
            "live": self.live_url,
            "download": self.download_url,
        }
        return {kind: url for kind, url in found.items() if url}


class ProjectDraft(BaseModel):
    """Client-side payload for create and update requests.

    ``technologies`` is carried through untouched; uniqueness is the
    tag editor's job, not this schema's.
    """

    title: str
    description: str
    technologies: list[str] = Field(default_factory=list)
    download_url: str | None = Field(default=None, serialization_alias="downloadUrl")
    github_url: str | None = Field(default=None, serialization_alias="githubUrl")
    live_url: str | None = Field(default=None, serialization_alias="liveUrl")

    @field_validator("title", "description", mode="before")
    @classmethod
    def required_text(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            raise PydanticCustomError(
                "required", "{field} is required", {"field": info.field_name.capitalize()},
            )
        return v.strip() if isinstance(v, str) else v

    @field_validator(*URL_FIELDS, mode="before")
    @classmethod
    def optional_url(cls, v: Any) -> Any:
        if v is None:
            return None
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return None
        try:
            parsed = _url_adapter.validate_python(v)
        except ValidationError:
            raise PydanticCustomError("url", "Please enter a valid URL") from None
        if not parsed.host:
            raise PydanticCustomError("url", "Please enter a valid URL")
        return v

    def to_payload(self) -> dict[str, Any]:
        """JSON body for the site: camelCase keys, absent URLs omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

