"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "refine-client"
APP_AUTHOR = "refine-client"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_REFINE_URL = "REFINE_URL"
ENV_REFINE_PROFILE = "REFINE_PROFILE"

# Server defaults
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3

# Command paths
CREATE_PROJECT_PATH = "/command/core/create-project-from-upload"
DELETE_PROJECT_PATH = "/command/core/delete-project"
APPLY_OPERATIONS_PATH = "/command/core/apply-operations"
GET_PROJECT_METADATA_PATH = "/command/core/get-project-metadata"
