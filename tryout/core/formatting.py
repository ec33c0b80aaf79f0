"""
Formatting and name helpers for tryout.
"""

from datetime import datetime, timedelta

DATE_FORMAT = "%Y-%m-%d"


def today_stamp(today: datetime = None) -> str:
    """Date prefix used for new folders (YYYY-MM-DD)."""
    return (today or datetime.now()).strftime(DATE_FORMAT)


def sanitize_name(name: str) -> str:
    """
    Turn free text into a folder label.

    Only lowercases and replaces spaces with hyphens. Everything else is
    kept as typed.
    """
    return name.lower().replace(" ", "-")


def relative_time(modified_at: datetime, now: datetime = None) -> str:
    """
    Compact age of a timestamp: now, 5m, 3h, 2d, 1w.

    Values are floored, so 90 seconds is "1m" and 13 days is "1w".
    """
    age = (now or datetime.now()) - modified_at
    if age < timedelta(minutes=1):
        return "now"
    seconds = age.total_seconds()
    if age < timedelta(hours=1):
        return f"{int(seconds // 60)}m"
    if age < timedelta(days=1):
        return f"{int(seconds // 3600)}h"
    if age < timedelta(days=7):
        return f"{int(seconds // 86400)}d"
    return f"{int(seconds // (86400 * 7))}w"
