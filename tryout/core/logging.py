"""
Logging utilities for tryout.

stdout is reserved for the single result line the shell function reads, so
human-facing messages go to stderr and are mirrored into a daily log file.
"""

import re
import sys
from datetime import datetime
from pathlib import Path


class TeeOutput:
    """Write to a terminal stream and a log file, filtering out UI noise."""

    # Patterns to skip in log file (picker frames, hints, etc.)
    _SKIP_PATTERNS = [
        r'[╭│╰├╮╯┤─┬┴━]',         # Box drawing characters
        r'[→▸▼▲]',                # Cursor indicators
        r'enter.*esc',             # Footer key hints
        r'^\s*$',                  # Blank lines
    ]

    def __init__(self, log_path: Path, stream=None, version: str = None):
        self.terminal = stream if stream is not None else sys.stderr
        self.log_file = open(log_path, "a", encoding="utf-8")
        self._skip_regex = re.compile('|'.join(self._SKIP_PATTERNS))
        self._line_buffer = ""
        self.log_file.write(f"\n{'='*60}\n")
        version_str = f" v{version}" if version else ""
        self.log_file.write(f"Session started: {datetime.now().isoformat()}{version_str}\n")
        self.log_file.write(f"{'='*60}\n\n")
        self.log_file.flush()

    def write(self, message):
        self.terminal.write(message)

        # Strip ANSI escape codes
        clean = re.sub(r'\x1b\[[0-9;]*[mKHJ]', '', message)

        # Buffer partial lines (for \r carriage return handling)
        self._line_buffer += clean

        while '\n' in self._line_buffer:
            line, self._line_buffer = self._line_buffer.split('\n', 1)
            if not self._skip_regex.search(line):
                stripped = line.rstrip()
                if stripped and not stripped.startswith('\r'):
                    timestamp = datetime.now().strftime("[%H:%M:%S]")
                    self.log_file.write(f"{timestamp} {stripped}\n")

        # Only keep the last version of a carriage-return overwritten line
        if '\r' in self._line_buffer:
            self._line_buffer = self._line_buffer.rsplit('\r', 1)[-1]

        self.log_file.flush()

    def flush(self):
        self.terminal.flush()
        self.log_file.flush()

    def isatty(self) -> bool:
        return self.terminal.isatty()

    def fileno(self) -> int:
        return self.terminal.fileno()

    def close(self):
        if self._line_buffer.strip() and not self._skip_regex.search(self._line_buffer):
            timestamp = datetime.now().strftime("[%H:%M:%S]")
            self.log_file.write(f"{timestamp} {self._line_buffer.rstrip()}\n")
        self.log_file.close()

    def log_only(self, message: str):
        """Write a message only to the log file, not to terminal."""
        timestamp = datetime.now().strftime("[%H:%M:%S]")
        self.log_file.write(f"{timestamp} {message}\n")
        self.log_file.flush()


def get_log_path(logs_dir: Path, day: datetime = None) -> Path:
    """Daily log file: logs/YYYY-MM-DD.log."""
    day = day or datetime.now()
    return logs_dir / f"{day.strftime('%Y-%m-%d')}.log"


def debug_log(message: str):
    """Log a debug message to file only (not shown to user)."""
    if hasattr(sys.stderr, 'log_only'):
        sys.stderr.log_only(message)
    # If not using TeeOutput (e.g., tests), silently ignore
