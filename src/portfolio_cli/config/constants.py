"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "portfolio-cli"
APP_AUTHOR = "portfolio"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_SITE_URL = "PORTFOLIO_SITE_URL"
ENV_SITE_PROFILE = "PORTFOLIO_SITE_PROFILE"

# API defaults
DEFAULT_API_BASE = "/api"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
