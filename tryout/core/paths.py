"""
Centralized path management for tryout.

User-level files live in a config folder (~/.config/tryout by default):

    ~/.config/tryout/
        settings.json   - User preferences (workspace path, git behaviour)
        logs/           - Session logs, one file per day
    ~/tries/            - Default workspace holding the experiment folders
"""

import os
from pathlib import Path

# Folder name for app data under ~/.config
APP_DIR_NAME = "tryout"

# Default workspace folder name under the home directory
WORKSPACE_FOLDER_NAME = "tries"


def get_config_dir() -> Path:
    """
    Get the config directory.

    TRYOUT_CONFIG_DIR overrides the location (used by tests and for
    portable setups). Otherwise XDG_CONFIG_HOME or ~/.config is used.
    """
    override = os.environ.get("TRYOUT_CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_settings_path() -> Path:
    """Get path to user settings file."""
    return get_config_dir() / "settings.json"


def get_logs_dir() -> Path:
    """Get the logs directory, creating it if needed."""
    logs_dir = get_config_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def get_default_workspace_path() -> Path:
    """Get the default workspace directory (~/tries)."""
    return Path.home() / WORKSPACE_FOLDER_NAME


def expand_user_path(path: str | Path) -> Path:
    """Expand a leading ~ in a configured path."""
    return Path(os.path.expanduser(str(path)))
