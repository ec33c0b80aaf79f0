"""
Directory catalog.

Lists the experiment folders under a workspace, splits each name into its
date prefix and label, and orders them most recently modified first.
"""

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class DirectoryEntry:
    """One child folder of the workspace."""
    name: str
    path: Path
    modified_at: datetime
    date_prefix: str = ""  # "YYYY-MM-DD" or "" when the name has no prefix
    label: str = ""


def parse_directory_name(name: str) -> tuple[str, str]:
    """
    Split "YYYY-MM-DD-label" into ("YYYY-MM-DD", "label").

    Purely lexical: only the hyphens at offsets 4, 7 and 10 are checked,
    the digits are not validated. Names that don't fit return ("", name).
    """
    if len(name) >= 11 and name[4] == "-" and name[7] == "-" and name[10] == "-":
        return name[:10], name[11:]
    return "", name


def list_directories(base_path: Path) -> list[DirectoryEntry]:
    """
    List workspace folders, most recent first.

    A missing workspace is an empty catalog. Files and symlinks are ignored
    and so are children whose metadata can't be read. Other OS errors
    propagate.
    """
    base_path = Path(base_path)
    try:
        scan = os.scandir(base_path)
    except FileNotFoundError:
        return []

    entries = []
    with scan:
        for child in scan:
            try:
                if not child.is_dir(follow_symlinks=False):
                    continue
                mtime = child.stat().st_mtime
            except OSError:
                continue

            date_prefix, label = parse_directory_name(child.name)
            entries.append(DirectoryEntry(
                name=child.name,
                path=base_path / child.name,
                modified_at=datetime.fromtimestamp(mtime),
                date_prefix=date_prefix,
                label=label,
            ))

    # sorted() is stable, so equal mtimes keep the listing order
    return sorted(entries, key=lambda e: e.modified_at, reverse=True)
