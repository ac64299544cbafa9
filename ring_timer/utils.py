import sys
import os

HOUR_IN_MILLIS = 60 * 60 * 1000
MINUTE_IN_MILLIS = 60 * 1000
SECOND_IN_MILLIS = 1000

def resource_path(relative_path: str) -> str:
    """Return absolute path to resource inside the 'resources' folder."""
    base = sys._MEIPASS if hasattr(sys, "_MEIPASS") else os.path.abspath(".")
    return os.path.join(base, "resources", relative_path)

def format_time(remaining_millis: int) -> str:
    """Format remaining milliseconds as MM:SS.

    Minutes are taken from the remainder within the current hour and the
    hour itself is not shown, so 1:01:05 renders as 01:05.
    """
    remaining = max(int(remaining_millis), 0)
    minutes = (remaining % HOUR_IN_MILLIS) // MINUTE_IN_MILLIS
    seconds = (remaining // SECOND_IN_MILLIS) % 60
    return f"{minutes:02}:{seconds:02}"
