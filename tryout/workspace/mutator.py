"""
Folder creation and deletion for tryout.
"""

import shutil
from datetime import datetime
from pathlib import Path
from typing import Iterable

from ..core.formatting import today_stamp, sanitize_name
from ..core.logging import debug_log


def next_free_path(path: Path) -> Path:
    """
    First of path, path-2, path-3, ... that doesn't exist yet.

    Suffixes are always appended to the original path, never stacked.
    """
    candidate = path
    counter = 2
    while candidate.exists():
        candidate = path.with_name(f"{path.name}-{counter}")
        counter += 1
    return candidate


def create_directory(base_path: Path, raw_name: str, today: datetime = None) -> Path:
    """
    Create <today>-<sanitized name> under base_path and return its path.

    Never reuses an existing folder; collisions get a -2, -3, ... suffix.
    """
    dir_name = f"{today_stamp(today)}-{sanitize_name(raw_name)}"
    final_path = next_free_path(Path(base_path) / dir_name)
    final_path.mkdir(parents=True)
    debug_log(f"CREATE | {final_path}")
    return final_path


def delete_directories(paths: Iterable[Path]):
    """
    Recursively remove each path, in order.

    Stops at the first failure and re-raises it. Paths after the failing
    one are left untouched.
    """
    for path in paths:
        shutil.rmtree(path)
        debug_log(f"DELETE | {path}")
