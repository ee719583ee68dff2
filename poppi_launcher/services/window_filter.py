"""
Visibility filter for enumerated windows.

Backends report every top-level surface they know about, including
compositor chrome, notification bubbles, menus, panels and the launcher's
own window. Only windows a user would switch to survive.
"""

import logging
from typing import Iterable, List

from ..models.window import OpenWindow


logger = logging.getLogger(__name__)

MIN_TITLE_LENGTH = 3

HIDDEN_WINDOW_MARKERS = (
    "wayland to x recording bridge",
    "xwayland video bridge",
    "xwaylandvideobridge",
    "desktop window",
    "gnome-shell",
    "mutter",
    "plasmashell",
    "notification",
    "popup",
    "tooltip",
    "dropdown",
    "menu",
    "dock",
    "panel",
    "waybar",
    "poppi_launcher",
    "poppi launcher",
)


def is_user_visible(window: OpenWindow) -> bool:
    """Return True when a window should be offered for switching.

    Args:
        window: Window reported by a backend

    Returns:
        False for blank or very short titles and for windows whose title or
        app name contains a known non-application marker
    """
    title = window.title.strip()
    if len(title) < MIN_TITLE_LENGTH:
        return False

    title_lower = window.title_lower
    app_lower = window.app_name_lower
    for marker in HIDDEN_WINDOW_MARKERS:
        if marker in title_lower or marker in app_lower:
            return False
    return True


def filter_visible(windows: Iterable[OpenWindow]) -> List[OpenWindow]:
    """Keep user-visible windows, preserving order."""
    visible = []
    for window in windows:
        if is_user_visible(window):
            visible.append(window)
        else:
            logger.debug(f"Filtered window {window.window_id} ({window.app_name}: {window.title!r})")
    return visible


def dedupe_windows(windows: Iterable[OpenWindow]) -> List[OpenWindow]:
    """Drop windows whose (title, app name) was already seen, keeping the first."""
    seen = set()
    unique = []
    for window in windows:
        key = window.dedupe_key
        if key in seen:
            continue
        seen.add(key)
        unique.append(window)
    return unique
