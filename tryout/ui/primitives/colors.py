"""
Shared color definitions for terminal output.
"""


def rgb(r: int, g: int, b: int) -> str:
    return f"\x1b[38;2;{r};{g};{b}m"


class Colors:
    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    STRIKE = "\x1b[9m"
    PINK = rgb(255, 135, 215)
    GRAY = rgb(98, 98, 98)
    RED = rgb(255, 0, 0)
    WHITE = rgb(238, 238, 238)
