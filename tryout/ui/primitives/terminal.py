"""
Terminal utilities for tryout.

The picker draws on stderr because stdout is captured by the shell function.
"""

import os
import re
import sys

ANSI_PATTERN = re.compile(r'\x1b\[[0-9;]*m')


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_PATTERN.sub('', text)


def ui_stream():
    """Stream the UI is drawn on (bypasses any TeeOutput wrapper)."""
    return sys.__stderr__ if sys.__stderr__ else sys.stderr


def get_terminal_size() -> os.terminal_size:
    """Size of the terminal the UI is drawn on, falling back to 80x24."""
    try:
        return os.get_terminal_size(ui_stream().fileno())
    except (OSError, ValueError, AttributeError):
        return os.terminal_size((80, 24))


def truncate_text(text: str, max_len: int, suffix: str = "...") -> str:
    """Truncate text to max_len, adding suffix if truncated. Returns plain text (no ANSI)."""
    text = strip_ansi(text)
    if len(text) <= max_len:
        return text
    if max_len <= len(suffix):
        return text[:max_len]
    return text[:max_len - len(suffix)] + suffix


def write_frame(frame: str):
    """
    Redraw the whole screen with frame in a single write.

    \\033[K after each line clears what the previous frame left behind,
    \\033[J clears everything below the new frame.
    """
    out = ui_stream()
    content = frame.replace('\n', '\033[K\r\n')
    out.write(f"\033[H{content}\033[K\033[J")
    out.flush()


def enter_alt_screen():
    """Switch to the alternate screen buffer and hide the cursor."""
    out = ui_stream()
    out.write("\033[?1049h\033[?25l\033[H")
    out.flush()


def leave_alt_screen():
    """Restore the main screen buffer and the cursor."""
    out = ui_stream()
    out.write("\033[?25h\033[?1049l")
    out.flush()
