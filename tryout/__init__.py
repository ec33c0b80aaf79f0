"""
tryout - Ephemeral workspace manager.

Lists, fuzzy-searches, creates and deletes dated experiment directories
(YYYY-MM-DD-label) under a single workspace folder.

Import from submodules directly:
    from tryout.workspace import list_directories, create_directory
    from tryout.config import UserSettings
    from tryout.ui.session import run_picker
"""


def _get_version():
    """Read version from VERSION file, falling back to installed metadata."""
    from pathlib import Path
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    try:
        from importlib.metadata import version, PackageNotFoundError
        return version("tryout")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
