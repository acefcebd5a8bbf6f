"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "nautobot-cli"
APP_AUTHOR = "nautobot-cli"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_NAUTOBOT_URL = "NAUTOBOT_URL"
ENV_NAUTOBOT_TOKEN = "NAUTOBOT_TOKEN"
ENV_NAUTOBOT_PROFILE = "NAUTOBOT_PROFILE"

# API defaults
DEFAULT_TIMEOUT = 10.0
DEFAULT_PAGE_VALUE = 50

# Endpoints, relative to the base URL
SITES_ENDPOINT = "api/dcim/sites"
INTERFACES_STATUS_ENDPOINT = "api/plugins/interfaces-telemetry/interfaces-status"
STATUS_ENDPOINT = "api/status"
