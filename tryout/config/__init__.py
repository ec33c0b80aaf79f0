"""
Configuration management for tryout.

Config files:
- settings.json: User preferences (workspace path, git init/commit toggles)
"""

from .settings import UserSettings

__all__ = [
    "UserSettings",
]
