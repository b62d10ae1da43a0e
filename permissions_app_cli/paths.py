"""Path policy for the permissions CLI.

Centralizes where settings and logs live. Environment variables override the
defaults so tests and unusual setups can redirect everything.
"""

import os
from pathlib import Path

CONFIG_ENV_VAR = "ALLOW_PERMISSIONS_CONFIG"
LOG_PATH_ENV_VAR = "ALLOW_PERMISSIONS_LOG_PATH"
LOG_LEVEL_ENV_VAR = "ALLOW_PERMISSIONS_LOG_LEVEL"

SETTINGS_FILENAME = "settings.json"
LOG_FILENAME = "allow-permissions.log.jsonl"


def get_config_dir() -> Path:
    """Default per-user config directory (~/.config/claude-code)."""
    return Path.home() / ".config" / "claude-code"


def get_settings_path() -> Path:
    """Settings file the allowed tools are written to."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_config_dir() / SETTINGS_FILENAME


def get_log_path() -> Path:
    override = os.environ.get(LOG_PATH_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_settings_path().parent / LOG_FILENAME


def get_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper()
