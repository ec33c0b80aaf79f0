"""
Picker frame rendering.

render() is a pure function of the session state: no terminal access and no
global style table. Colors come from the Styles object passed in, so tests
can render with PLAIN_STYLES and compare text directly.
"""

from dataclasses import dataclass, fields
from datetime import datetime

from tryout.core.formatting import relative_time
from tryout.workspace import DirectoryEntry
from ..primitives import Colors, truncate_text
from .state import SessionState, MODE_DELETE, MODE_CONFIRM, CONFIRM_TOKEN

TITLE = "tryout"
PLACEHOLDER = "Search or create..."

CURSOR_MARKER = " → "
NO_MARKER = "   "
FOLDER_ICON = "📁 "
TRASH_ICON = "🗑️  "

# Names are padded to this many columns before the age column
NAME_COLUMN_WIDTH = 40
MIN_AGE_GAP = 2

# Title, search, blank, blank, footer, status
CHROME_LINES = 6


@dataclass(frozen=True)
class Styles:
    """ANSI prefixes for each visual role. Empty string means unstyled."""
    title: str = Colors.BOLD + Colors.PINK
    prompt: str = Colors.GRAY
    input: str = Colors.WHITE
    selected: str = Colors.BOLD + Colors.PINK
    normal: str = Colors.WHITE
    dim: str = Colors.GRAY
    marked: str = Colors.RED
    deleted: str = Colors.RED + Colors.STRIKE
    help_key: str = Colors.PINK
    help_desc: str = Colors.GRAY
    reset: str = Colors.RESET

    def paint(self, role: str, text: str) -> str:
        prefix = getattr(self, role)
        if not prefix:
            return text
        return f"{prefix}{text}{self.reset}"


DEFAULT_STYLES = Styles()
PLAIN_STYLES = Styles(**{f.name: "" for f in fields(Styles)})


def _hint(styles: Styles, key: str, desc: str) -> str:
    return f"{styles.paint('help_key', key)} {styles.paint('help_desc', desc)}"


def render_entry(
    state: SessionState,
    index: int,
    entry: DirectoryEntry,
    styles: Styles,
    now: datetime,
    width: int = None,
) -> str:
    """One list row: cursor marker, icon, name, right-aligned age."""
    is_cursor = index == state.cursor
    is_marked = state.is_marked(index)

    marker = styles.paint("selected", CURSOR_MARKER) if is_cursor else NO_MARKER
    icon = styles.paint("marked", TRASH_ICON) if is_marked else FOLDER_ICON

    age = relative_time(entry.modified_at, now)
    name = entry.name
    if width:
        # marker(3) + icon(3) + gap + age
        room = width - len(NO_MARKER) - 3 - MIN_AGE_GAP - len(age)
        if room > 0 and len(name) > room:
            name = truncate_text(name, room)

    if is_marked:
        shown = styles.paint("deleted", name)
    elif entry.date_prefix and name == entry.name:
        label_role = "selected" if is_cursor else "normal"
        shown = styles.paint("dim", entry.date_prefix + "-") + styles.paint(label_role, entry.label)
    else:
        shown = styles.paint("selected" if is_cursor else "normal", name)

    padding = max(MIN_AGE_GAP, NAME_COLUMN_WIDTH - len(name))
    return f"{marker}{icon}{shown}{' ' * padding}{styles.paint('dim', age)}"


def render_footer(state: SessionState, styles: Styles) -> str:
    """Mode-specific key hints."""
    count = len(state.marked)

    if state.mode == MODE_CONFIRM:
        return (
            f"{styles.paint('marked', '⚠️')} Type {styles.paint('marked', CONFIRM_TOKEN)} "
            f"to confirm deletion ({count} items): {state.confirmation_text}"
        )

    if state.mode == MODE_DELETE:
        if count > 0:
            return " · ".join([
                _hint(styles, "space", "toggle mark"),
                _hint(styles, "enter", f"delete {count}"),
                _hint(styles, "esc", "cancel"),
            ])
        return " · ".join([
            _hint(styles, "space", "mark for deletion"),
            _hint(styles, "esc", "cancel"),
        ])

    return " · ".join([
        _hint(styles, "enter", "select"),
        _hint(styles, "ctrl+d", "delete"),
        _hint(styles, "esc", "quit"),
    ])


def _visible_window(total: int, cursor: int, rows: int) -> tuple[int, int]:
    """Slice [start, end) of the list that keeps the cursor on screen."""
    if rows <= 0 or total <= rows:
        return 0, total
    start = max(0, min(cursor - rows + 1, total - rows))
    return start, start + rows


def render(
    state: SessionState,
    styles: Styles = DEFAULT_STYLES,
    now: datetime = None,
    width: int = None,
    height: int = None,
) -> str:
    """Render a full frame for state."""
    now = now or datetime.now()
    lines = [styles.paint("title", TITLE), ""]

    if state.search_query:
        search = styles.paint("input", state.search_query)
    else:
        search = styles.paint("dim", PLACEHOLDER)
    lines.append(f"{styles.paint('prompt', 'Search: ')}{search}")
    lines.append("")

    entries = state.visible_entries
    if not entries:
        if state.search_query:
            lines.append(
                styles.paint("dim", "  No matches. Press enter to create: ")
                + styles.paint("normal", state.search_query)
            )
        else:
            lines.append(styles.paint("dim", "  No experiments yet. Type a name to create one."))
    else:
        rows = max(1, height - CHROME_LINES) if height else 0
        start, end = _visible_window(len(entries), state.cursor, rows)
        if start > 0:
            lines.append(styles.paint("dim", f"   ▲ {start} more above"))
        for index in range(start, end):
            lines.append(render_entry(state, index, entries[index], styles, now, width))
        if end < len(entries):
            lines.append(styles.paint("dim", f"   ▼ {len(entries) - end} more below"))

    lines.append("")
    lines.append(render_footer(state, styles))
    if state.status_message:
        lines.append(styles.paint("marked", state.status_message))

    return "\n".join(lines)
