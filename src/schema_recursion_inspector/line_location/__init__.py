"""Line location exports."""

from .line_locator import locate_all_lines, locate_line, search_key_for_step

__all__ = [
    "locate_all_lines",
    "locate_line",
    "search_key_for_step",
]
