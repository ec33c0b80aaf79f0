"""
Workspace folders: listing, fuzzy filtering, creation and deletion.
"""

from .catalog import DirectoryEntry, list_directories, parse_directory_name
from .fuzzy import FuzzyMatch, fuzzy_match, filter_entries
from .mutator import next_free_path, create_directory, delete_directories

__all__ = [
    # Catalog
    "DirectoryEntry",
    "list_directories",
    "parse_directory_name",
    # Fuzzy
    "FuzzyMatch",
    "fuzzy_match",
    "filter_entries",
    # Mutator
    "next_free_path",
    "create_directory",
    "delete_directories",
]
