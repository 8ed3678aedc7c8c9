"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from portfolio_cli.cache import QueryCache
from portfolio_cli.client.api import PortfolioClient
from portfolio_cli.config.manager import ConfigManager
from portfolio_cli.config.models import SiteProfile

SITE = "https://site.test"


def pytest_addoption(parser):
    parser.addoption("--site-url", action="store", default=None)


class RecordingNotifier:
    """Collects notifications instead of printing them."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, bool]] = []

    def notify(self, title: str, *, destructive: bool = False) -> None:
        self.messages.append((title, destructive))

    @property
    def titles(self) -> list[str]:
        return [title for title, _ in self.messages]


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> SiteProfile:
    """Return a sample site profile for testing."""
    return SiteProfile(name="test-site", url=SITE)


@pytest.fixture
def client(sample_profile: SiteProfile) -> Iterator[PortfolioClient]:
    with PortfolioClient(sample_profile) as c:
        yield c


@pytest.fixture
def cache() -> QueryCache:
    return QueryCache()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def project_data() -> dict:
    """A project as the site returns it."""
    return {
        "id": "7",
        "title": "Ledger",
        "description": "Double-entry bookkeeping API.",
        "technologies": ["Python", "FastAPI"],
        "githubUrl": "https://github.com/me/ledger",
        "liveUrl": None,
        "downloadUrl": None,
        "createdAt": "2024-03-05T10:00:00Z",
    }


@pytest.fixture
def projects_data(project_data: dict) -> list[dict]:
    return [
        project_data,
        {
            "id": "8",
            "title": "Tiler",
            "description": "Map tile server.",
            "technologies": ["Java"],
            "liveUrl": "https://tiles.example.com",
        },
    ]
