"""
User settings management for tryout.

Manages ~/.config/tryout/settings.json - user preferences that persist across runs.
"""

import json
from pathlib import Path

from ..core.paths import get_default_workspace_path, expand_user_path


class UserSettings:
    """
    Manages settings.json.

    Stores:
    - Workspace path (where experiment folders are created and listed)
    - Whether new folders get `git init`
    - Whether that init is followed by an initial commit
    """

    def __init__(self, path: Path):
        self.path = path
        self.workspace_path: Path = get_default_workspace_path()
        # Run `git init` in newly created folders
        self.auto_init: bool = True
        # Follow the init with a placeholder commit
        self.initial_commit: bool = True
        # Track if this is a fresh settings file (no file existed)
        self._is_new: bool = False

    @classmethod
    def load(cls, path: Path) -> "UserSettings":
        """Load user settings from file, falling back to defaults."""
        settings = cls(path)

        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)

                workspace = data.get("workspace_path")
                if workspace:
                    settings.workspace_path = expand_user_path(workspace)
                settings.auto_init = bool(data.get("auto_init", True))
                settings.initial_commit = bool(data.get("initial_commit", True))
            except (json.JSONDecodeError, AttributeError, IOError):
                settings._is_new = True
        else:
            settings._is_new = True

        return settings

    @property
    def is_new(self) -> bool:
        """True when no usable settings file was found (defaults in use)."""
        return self._is_new

    def save(self):
        """Save user settings to file."""
        data = {
            "workspace_path": str(self.workspace_path),
            "auto_init": self.auto_init,
            "initial_commit": self.initial_commit,
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        self._is_new = False

    def ensure_workspace(self) -> Path:
        """Create the workspace folder if missing. Returns its path."""
        self.workspace_path.mkdir(parents=True, exist_ok=True)
        return self.workspace_path
