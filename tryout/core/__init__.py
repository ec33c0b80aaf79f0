"""
Core utilities for tryout.

Shared paths, logging and formatting.
"""

from .paths import (
    get_config_dir,
    get_settings_path,
    get_logs_dir,
    get_default_workspace_path,
    expand_user_path,
)

from .formatting import (
    DATE_FORMAT,
    today_stamp,
    sanitize_name,
    relative_time,
)

__all__ = [
    # Paths
    "get_config_dir",
    "get_settings_path",
    "get_logs_dir",
    "get_default_workspace_path",
    "expand_user_path",
    # Formatting
    "DATE_FORMAT",
    "today_stamp",
    "sanitize_name",
    "relative_time",
]
