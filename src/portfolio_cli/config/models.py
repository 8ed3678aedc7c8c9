"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from portfolio_cli.config.constants import DEFAULT_TIMEOUT


class SiteProfile(BaseModel):
    """A named portfolio site connection profile."""

    name: str
    url: str = Field(description="Site base URL, e.g. https://me.example.com")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    default_format: str = "table"
    profiles: dict[str, SiteProfile] = Field(default_factory=dict)
