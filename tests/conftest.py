"""Pytest configuration and shared fixtures."""

import os
import tempfile
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from tryout.workspace import DirectoryEntry, parse_directory_name

# Fixed "now" for rendering and age tests
NOW = datetime(2025, 3, 14, 12, 0, 0)


@dataclass
class WorkspaceEnv:
    """Isolated workspace for catalog/mutator tests."""
    root: Path

    def make_dir(self, name: str, age: timedelta = timedelta(0)) -> Path:
        """Create a folder and backdate its mtime by age."""
        path = self.root / name
        path.mkdir(parents=True, exist_ok=True)
        stamp = (datetime.now() - age).timestamp()
        os.utime(path, (stamp, stamp))
        return path

    def make_file(self, name: str) -> Path:
        path = self.root / name
        path.write_text("not a folder")
        return path


@pytest.fixture
def workspace():
    """A temporary workspace directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield WorkspaceEnv(root=Path(tmpdir))


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep settings and logs out of the real ~/.config."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("TRYOUT_CONFIG_DIR", str(config_dir))
    return config_dir


def make_entry(name: str, age: timedelta = timedelta(0), base: Path = Path("/ws")) -> DirectoryEntry:
    """Build a DirectoryEntry without touching disk."""
    date_prefix, label = parse_directory_name(name)
    return DirectoryEntry(
        name=name,
        path=base / name,
        modified_at=NOW - age,
        date_prefix=date_prefix,
        label=label,
    )
