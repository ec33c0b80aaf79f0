"""
Interactive picker session.

- state:  events, SessionState and the SessionMachine that applies them
- view:   pure frame rendering
- picker: terminal event loop with the background catalog loader
"""

from .state import (
    MODE_NORMAL,
    MODE_DELETE,
    MODE_CONFIRM,
    CMD_RELOAD,
    CMD_QUIT,
    CREATE_PREFIX,
    CONFIRM_TOKEN,
    TextChanged,
    KeyPressed,
    CatalogLoaded,
    LoadFailed,
    SessionState,
    SessionMachine,
    make_create_request,
    parse_create_request,
)
from .view import Styles, DEFAULT_STYLES, PLAIN_STYLES, render
from .picker import CatalogLoader, Picker, run_picker

__all__ = [
    # State
    "MODE_NORMAL",
    "MODE_DELETE",
    "MODE_CONFIRM",
    "CMD_RELOAD",
    "CMD_QUIT",
    "CREATE_PREFIX",
    "CONFIRM_TOKEN",
    "TextChanged",
    "KeyPressed",
    "CatalogLoaded",
    "LoadFailed",
    "SessionState",
    "SessionMachine",
    "make_create_request",
    "parse_create_request",
    # View
    "Styles",
    "DEFAULT_STYLES",
    "PLAIN_STYLES",
    "render",
    # Picker
    "CatalogLoader",
    "Picker",
    "run_picker",
]
