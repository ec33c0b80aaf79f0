"""
User interface module.

Organized into layers:
- primitives/: Terminal I/O (keyboard, colors, terminal control)
- session/: The interactive picker (state machine, renderer, event loop)
"""

from .session import run_picker, parse_create_request

__all__ = [
    "run_picker",
    "parse_create_request",
]
