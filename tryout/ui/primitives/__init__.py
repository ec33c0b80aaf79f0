"""
Terminal I/O primitives.

Low-level terminal control, keyboard input, and color handling.
"""

from .terminal import (
    strip_ansi,
    ui_stream,
    get_terminal_size,
    truncate_text,
    write_frame,
    enter_alt_screen,
    leave_alt_screen,
)
from .keyboard_input import (
    raw_terminal,
    cbreak_noecho,
    getch_with_timeout,
    is_printable,
    key_to_char,
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_ENTER,
    KEY_ESC,
    KEY_BACKSPACE,
    KEY_TAB,
    KEY_SPACE,
    KEY_CTRL_C,
    KEY_CTRL_D,
    KEY_CTRL_N,
    KEY_CTRL_P,
)
from .colors import (
    Colors,
    rgb,
)

__all__ = [
    # Terminal
    "strip_ansi",
    "ui_stream",
    "get_terminal_size",
    "truncate_text",
    "write_frame",
    "enter_alt_screen",
    "leave_alt_screen",
    # Keyboard input
    "raw_terminal",
    "cbreak_noecho",
    "getch_with_timeout",
    "is_printable",
    "key_to_char",
    "KEY_UP",
    "KEY_DOWN",
    "KEY_LEFT",
    "KEY_RIGHT",
    "KEY_ENTER",
    "KEY_ESC",
    "KEY_BACKSPACE",
    "KEY_TAB",
    "KEY_SPACE",
    "KEY_CTRL_C",
    "KEY_CTRL_D",
    "KEY_CTRL_N",
    "KEY_CTRL_P",
    # Colors
    "Colors",
    "rgb",
]
