"""
Interactive picker screen.

Owns the terminal for one session. Catalog loads run on a background thread
and post their outcome into a queue; the loop drains that queue, then waits
briefly for a key, so every event reaches the state machine one at a time
on the main thread.
"""

import queue
import threading
from pathlib import Path
from typing import Callable

from tryout.core.logging import debug_log
from tryout.workspace import list_directories, delete_directories
from ..primitives import (
    cbreak_noecho,
    getch_with_timeout,
    get_terminal_size,
    write_frame,
    enter_alt_screen,
    leave_alt_screen,
)
from .state import (
    SessionState,
    SessionMachine,
    TextChanged,
    KeyPressed,
    CatalogLoaded,
    LoadFailed,
    CMD_RELOAD,
)
from .view import Styles, DEFAULT_STYLES, render

# How long a key read waits before checking for finished loads
REFRESH_INTERVAL_MS = 100


class CatalogLoader:
    """
    Lists the workspace on a daemon thread.

    Each request() starts one load that posts exactly one CatalogLoaded or
    LoadFailed event. Requests are fire-and-forget.
    """

    def __init__(
        self,
        base_path: Path,
        events: queue.Queue,
        lister: Callable[[Path], list] = list_directories,
    ):
        self._base_path = base_path
        self._events = events
        self._lister = lister
        self._thread: threading.Thread | None = None

    def request(self):
        """Start a load in the background."""
        self._thread = threading.Thread(target=self._load, daemon=True)
        self._thread.start()

    def wait(self, timeout: float = None):
        """Block until the latest load has posted its event."""
        if self._thread:
            self._thread.join(timeout)

    def _load(self):
        try:
            entries = self._lister(self._base_path)
        except OSError as e:
            self._events.put(LoadFailed(e))
            return
        self._events.put(CatalogLoaded(entries))


class Picker:
    """One interactive session over a workspace."""

    def __init__(
        self,
        base_path: Path,
        initial_query: str = "",
        styles: Styles = DEFAULT_STYLES,
        lister: Callable[[Path], list] = list_directories,
        deleter: Callable = delete_directories,
    ):
        self.state = SessionState(base_path=Path(base_path))
        self.machine = SessionMachine(self.state, deleter=deleter)
        self.events: queue.Queue = queue.Queue()
        self.loader = CatalogLoader(self.state.base_path, self.events, lister)
        self.styles = styles
        if initial_query:
            self.machine.handle(TextChanged(initial_query))

    def start(self):
        """Kick off the initial catalog load."""
        self.loader.request()

    def dispatch(self, event) -> None:
        """Feed one event to the machine and carry out its follow-up command."""
        command = self.machine.handle(event)
        if command == CMD_RELOAD:
            debug_log("PICKER | reload requested")
            self.loader.request()

    def pump_events(self) -> bool:
        """Process every queued background event. Returns True if any were handled."""
        handled = False
        while not self.state.done:
            try:
                event = self.events.get_nowait()
            except queue.Empty:
                break
            self.dispatch(event)
            handled = True
        return handled

    def frame(self) -> str:
        size = get_terminal_size()
        return render(self.state, self.styles, width=size.columns, height=size.lines)

    def loop(
        self,
        read_key: Callable[[], str | None],
        draw: Callable[[str], None],
    ) -> str:
        """
        Run until the session is done. Returns the session result.

        read_key returns a key, '' for ignored input, or None on timeout.
        """
        draw(self.frame())
        while not self.state.done:
            if self.pump_events():
                if self.state.done:
                    break
                draw(self.frame())

            key = read_key()
            if not key:
                continue
            self.dispatch(KeyPressed(key))
            if not self.state.done:
                draw(self.frame())

        # Loads still in flight are dropped with the queue
        return self.state.result

    def run(self) -> str:
        """Take over the terminal and run the session."""
        self.start()
        enter_alt_screen()
        try:
            with cbreak_noecho():
                return self.loop(lambda: getch_with_timeout(REFRESH_INTERVAL_MS), write_frame)
        except KeyboardInterrupt:
            return ""
        finally:
            leave_alt_screen()


def run_picker(base_path: Path, initial_query: str = "", styles: Styles = DEFAULT_STYLES) -> str:
    """
    Run an interactive session.

    Returns:
        A folder path, "CREATE:<name>" for a create request, or "" if cancelled.
    """
    return Picker(base_path, initial_query=initial_query, styles=styles).run()
