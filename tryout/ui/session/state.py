"""
Picker session state machine.

All session state lives in SessionState and is only changed by
SessionMachine.handle(), one event at a time. Events are a closed set of
small dataclasses; handle() routes each one to the handler for the current
mode and returns a follow-up command for the event loop (None, CMD_RELOAD
or CMD_QUIT).

Modes:
- normal:  type to filter, arrows to move, Enter selects or creates
- delete:  Space / ctrl+d toggle marks, Enter asks for confirmation
- confirm: type YES and press Enter to delete the marked folders
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Union

from tryout.core.logging import debug_log
from tryout.workspace import DirectoryEntry, filter_entries, delete_directories
from ..primitives import (
    key_to_char,
    KEY_UP,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESC,
    KEY_BACKSPACE,
    KEY_SPACE,
    KEY_CTRL_C,
    KEY_CTRL_D,
    KEY_CTRL_N,
    KEY_CTRL_P,
)

MODE_NORMAL = "normal"
MODE_DELETE = "delete"
MODE_CONFIRM = "confirm"

CMD_RELOAD = "reload"
CMD_QUIT = "quit"

# Prefix marking a result as "create a folder with this name"
CREATE_PREFIX = "CREATE:"

# Text that must be typed in confirm mode
CONFIRM_TOKEN = "YES"

CANCEL_KEYS = (KEY_ESC, KEY_CTRL_C)
UP_KEYS = (KEY_UP, KEY_CTRL_P)
DOWN_KEYS = (KEY_DOWN, KEY_CTRL_N)
TOGGLE_KEYS = (KEY_CTRL_D, KEY_SPACE)


# =============================================================================
# Events
# =============================================================================

@dataclass(frozen=True)
class TextChanged:
    """Search box now holds text."""
    text: str


@dataclass(frozen=True)
class KeyPressed:
    """A decoded key: KEY_* constant or a single character."""
    key: str


@dataclass(frozen=True)
class CatalogLoaded:
    """A background catalog load finished."""
    entries: list


@dataclass(frozen=True)
class LoadFailed:
    """A background catalog load raised."""
    error: Exception


Event = Union[TextChanged, KeyPressed, CatalogLoaded, LoadFailed]


# =============================================================================
# Results
# =============================================================================

def make_create_request(name: str) -> str:
    return f"{CREATE_PREFIX}{name}"


def parse_create_request(result: str) -> str | None:
    """Folder name carried by a create request, or None for other results."""
    if result.startswith(CREATE_PREFIX):
        return result[len(CREATE_PREFIX):]
    return None


# =============================================================================
# State
# =============================================================================

@dataclass
class SessionState:
    """Everything the picker knows. Mutated only by SessionMachine."""
    base_path: Path
    all_entries: list[DirectoryEntry] = field(default_factory=list)
    visible_entries: list[DirectoryEntry] = field(default_factory=list)
    cursor: int = 0
    mode: str = MODE_NORMAL
    marked: set[int] = field(default_factory=set)  # indexes into visible_entries
    confirmation_text: str = ""
    search_query: str = ""
    result: str = ""
    done: bool = False
    status_message: str = ""  # shown under the footer until the next key

    @property
    def selected_entry(self) -> DirectoryEntry | None:
        if 0 <= self.cursor < len(self.visible_entries):
            return self.visible_entries[self.cursor]
        return None

    def marked_entries(self) -> list[DirectoryEntry]:
        """Marked entries in list order (stale indexes are skipped)."""
        return [
            self.visible_entries[i] for i in sorted(self.marked)
            if i < len(self.visible_entries)
        ]

    def is_marked(self, index: int) -> bool:
        return self.mode in (MODE_DELETE, MODE_CONFIRM) and index in self.marked


# =============================================================================
# Machine
# =============================================================================

class SessionMachine:
    """Applies events to a SessionState."""

    def __init__(
        self,
        state: SessionState,
        deleter: Callable[[Iterable[Path]], None] = delete_directories,
    ):
        self.state = state
        self._deleter = deleter
        self._key_handlers = {
            MODE_NORMAL: self._normal_key,
            MODE_DELETE: self._delete_key,
            MODE_CONFIRM: self._confirm_key,
        }
        self._text_handlers = {
            MODE_NORMAL: self._normal_text,
            MODE_DELETE: self._ignore_text,
            MODE_CONFIRM: self._ignore_text,
        }

    def handle(self, event: Event) -> str | None:
        """Apply one event. Returns CMD_RELOAD, CMD_QUIT or None."""
        if self.state.done:
            return None

        if isinstance(event, KeyPressed):
            self.state.status_message = ""
            return self._key_handlers[self.state.mode](event.key)
        if isinstance(event, TextChanged):
            return self._text_handlers[self.state.mode](event.text)
        if isinstance(event, CatalogLoaded):
            return self._catalog_loaded(event.entries)
        if isinstance(event, LoadFailed):
            return self._load_failed(event.error)
        raise TypeError(f"unknown event: {event!r}")

    # -------------------------------------------------------------------------
    # Catalog events (any mode)
    # -------------------------------------------------------------------------

    def _catalog_loaded(self, entries: list[DirectoryEntry]) -> None:
        s = self.state
        s.all_entries = list(entries)
        if s.marked:
            # Marks point into the old snapshot
            s.marked.clear()
            if s.mode == MODE_CONFIRM:
                s.mode = MODE_DELETE
                s.confirmation_text = ""
        self._refilter()
        debug_log(f"CATALOG | loaded={len(s.all_entries)} | visible={len(s.visible_entries)}")
        return None

    def _load_failed(self, error: Exception) -> str:
        debug_log(f"CATALOG | load failed: {error}")
        self._finish("")
        return CMD_QUIT

    # -------------------------------------------------------------------------
    # Text events
    # -------------------------------------------------------------------------

    def _normal_text(self, text: str) -> None:
        self.state.search_query = text
        self._refilter()
        return None

    def _ignore_text(self, text: str) -> None:
        return None

    # -------------------------------------------------------------------------
    # Key events, one handler per mode
    # -------------------------------------------------------------------------

    def _normal_key(self, key: str) -> str | None:
        s = self.state
        if key in CANCEL_KEYS:
            self._finish("")
            return CMD_QUIT
        if key == KEY_ENTER:
            return self._select_or_create()
        if key in UP_KEYS:
            self._move_cursor(-1)
        elif key in DOWN_KEYS:
            self._move_cursor(1)
        elif key == KEY_CTRL_D:
            if s.visible_entries:
                s.mode = MODE_DELETE
        elif key == KEY_BACKSPACE:
            if s.search_query:
                return self._normal_text(s.search_query[:-1])
        else:
            char = key_to_char(key)
            if char:
                return self._normal_text(s.search_query + char)
        return None

    def _delete_key(self, key: str) -> str | None:
        s = self.state
        if key in CANCEL_KEYS:
            s.mode = MODE_NORMAL
            s.marked.clear()
        elif key == KEY_ENTER:
            if s.marked:
                s.mode = MODE_CONFIRM
                s.confirmation_text = ""
        elif key in UP_KEYS:
            self._move_cursor(-1)
        elif key in DOWN_KEYS:
            self._move_cursor(1)
        elif key in TOGGLE_KEYS:
            if s.cursor < len(s.visible_entries):
                s.marked ^= {s.cursor}
        return None

    def _confirm_key(self, key: str) -> str | None:
        s = self.state
        if key in CANCEL_KEYS:
            s.mode = MODE_DELETE
            s.confirmation_text = ""
        elif key == KEY_BACKSPACE:
            s.confirmation_text = s.confirmation_text[:-1]
        elif key == KEY_ENTER:
            if s.confirmation_text == CONFIRM_TOKEN:
                return self._execute_delete()
        else:
            char = key_to_char(key)
            if char:
                s.confirmation_text += char.upper()
        return None

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _select_or_create(self) -> str | None:
        s = self.state
        entry = s.selected_entry
        if entry is not None:
            self._finish(str(entry.path))
            return CMD_QUIT
        if s.search_query:
            self._finish(make_create_request(s.search_query))
            return CMD_QUIT
        return None

    def _execute_delete(self) -> str:
        s = self.state
        paths = [entry.path for entry in s.marked_entries()]
        try:
            self._deleter(paths)
        except OSError as e:
            debug_log(f"DELETE | failed after partial batch: {e}")
            s.status_message = f"Delete failed: {e}"
        else:
            debug_log(f"DELETE | removed {len(paths)} folder(s)")

        s.mode = MODE_NORMAL
        s.marked.clear()
        s.confirmation_text = ""
        return CMD_RELOAD

    def _move_cursor(self, delta: int):
        s = self.state
        target = s.cursor + delta
        if 0 <= target < len(s.visible_entries):
            s.cursor = target

    def _refilter(self):
        s = self.state
        s.visible_entries = filter_entries(s.search_query, s.all_entries)
        s.cursor = max(0, min(s.cursor, len(s.visible_entries) - 1))

    def _finish(self, result: str):
        self.state.result = result
        self.state.done = True
