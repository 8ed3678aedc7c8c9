"""Common response models."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body some servers send alongside a failure status."""

    message: str
    details: str | None = None
