"""E2E test configuration — live site fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def site_opts(request):
    url = request.config.getoption("--site-url")
    if not url:
        pytest.skip("Live site URL not provided")
    return ["--url", url]
