"""
Keyboard input handling for tryout.

Single-key reads with special-key decoding (arrows, Enter, Esc, ctrl keys).
"""

import sys
import os
import time
from contextlib import contextmanager

# Platform-specific imports
if os.name == 'nt':
    import msvcrt
else:
    import fcntl
    import termios
    import tty
    import select


@contextmanager
def raw_terminal():
    """Context manager for raw terminal mode (Unix only, no-op on Windows)."""
    if os.name == 'nt':
        yield None
    else:
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield fd
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


@contextmanager
def cbreak_noecho():
    """Context manager for cbreak mode with echo disabled (Unix only, no-op on Windows).

    Unlike raw mode, this preserves output processing (newlines work correctly)
    while disabling input echo and line buffering.
    """
    if os.name == 'nt':
        yield None
    else:
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            new_settings = termios.tcgetattr(fd)
            new_settings[3] = new_settings[3] & ~(termios.ECHO | termios.ICANON)
            new_settings[6][termios.VMIN] = 1
            new_settings[6][termios.VTIME] = 0
            termios.tcsetattr(fd, termios.TCSANOW, new_settings)
            yield fd
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def read_escape_sequence(fd) -> str:
    """
    Read remaining characters of an escape sequence after ESC was detected.

    Returns the extra characters (not including the initial ESC).
    Unix only - Windows handles escape sequences differently.
    """
    if os.name == 'nt':
        return ''

    flags = fcntl.fcntl(fd, fcntl.F_GETFL)
    fcntl.fcntl(fd, fcntl.F_SETFL, flags | os.O_NONBLOCK)
    try:
        select.select([sys.stdin], [], [], 0.005)
        extra = ''
        try:
            extra = sys.stdin.read(10) or ''
        except (IOError, BlockingIOError):
            pass
        return extra
    finally:
        fcntl.fcntl(fd, fcntl.F_SETFL, flags)


# Special key constants
KEY_UP = "KEY_UP"
KEY_DOWN = "KEY_DOWN"
KEY_LEFT = "KEY_LEFT"
KEY_RIGHT = "KEY_RIGHT"
KEY_ENTER = "KEY_ENTER"
KEY_ESC = "KEY_ESC"
KEY_BACKSPACE = "KEY_BACKSPACE"
KEY_TAB = "KEY_TAB"
KEY_SPACE = "KEY_SPACE"
KEY_CTRL_C = "KEY_CTRL_C"
KEY_CTRL_D = "KEY_CTRL_D"
KEY_CTRL_N = "KEY_CTRL_N"
KEY_CTRL_P = "KEY_CTRL_P"

# Platform-specific key code mappings (escape sequences -> KEY_* constants)
UNIX_ESCAPE_CODES = {
    '[A': KEY_UP,
    '[B': KEY_DOWN,
    '[C': KEY_RIGHT,
    '[D': KEY_LEFT,
    'OA': KEY_UP,
    'OB': KEY_DOWN,
    'OC': KEY_RIGHT,
    'OD': KEY_LEFT,
}

WINDOWS_KEY_CODES = {
    b'H': KEY_UP,
    b'P': KEY_DOWN,
    b'K': KEY_LEFT,
    b'M': KEY_RIGHT,
}

# Control characters shared by both platforms (raw mode delivers them as bytes)
CONTROL_CHARS = {
    '\r': KEY_ENTER,
    '\n': KEY_ENTER,
    '\x7f': KEY_BACKSPACE,
    '\x08': KEY_BACKSPACE,
    '\t': KEY_TAB,
    ' ': KEY_SPACE,
    '\x03': KEY_CTRL_C,
    '\x04': KEY_CTRL_D,
    '\x0e': KEY_CTRL_N,
    '\x10': KEY_CTRL_P,
}


def is_printable(key: str) -> bool:
    """True for a single printable character (not a KEY_* constant)."""
    return len(key) == 1 and key.isprintable()


def key_to_char(key: str) -> str:
    """Text a key contributes when typed (space is a special key but still text)."""
    if key == KEY_SPACE:
        return " "
    return key if is_printable(key) else ""


def _decode_unix(ch: str, fd) -> str:
    if ch in CONTROL_CHARS:
        return CONTROL_CHARS[ch]

    if ch == '\x1b':
        extra = read_escape_sequence(fd)
        if extra:
            return UNIX_ESCAPE_CODES.get(extra, '')  # '' for unknown sequences
        return KEY_ESC

    return ch


def _getch_windows() -> str:
    ch = msvcrt.getch()

    # Arrow keys send two bytes: 0xe0 or 0x00 followed by key code
    if ch in (b'\xe0', b'\x00'):
        return WINDOWS_KEY_CODES.get(msvcrt.getch(), '')

    if ch == b'\x1b':
        return KEY_ESC

    text = ch.decode('utf-8', errors='ignore')
    return CONTROL_CHARS.get(text, text)


def getch_with_timeout(timeout_ms: int = 100) -> str | None:
    """
    Read a single key from stdin with timeout.

    Returns:
        A KEY_* constant, a single character, '' for ignored escape
        sequences, or None if nothing was pressed before the timeout.
    """
    timeout_sec = timeout_ms / 1000.0

    if os.name == 'nt':
        end_time = time.time() + timeout_sec
        while time.time() < end_time:
            if msvcrt.kbhit():
                return _getch_windows()
            time.sleep(0.01)
        return None

    with raw_terminal() as fd:
        if select.select([sys.stdin], [], [], timeout_sec)[0]:
            ch = sys.stdin.read(1)
            return _decode_unix(ch, fd)
        return None

