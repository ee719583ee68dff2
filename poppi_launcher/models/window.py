"""Open window records and window id conversions.

Window ids are opaque strings whose format depends on the backend that
produced them. Each window carries a WindowSource tag so switching knows
which conversions are meaningful: X11 tools only understand X11 ids, and
the GNOME extension and sway IPC ids are only valid for their own backend.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class WindowSource(str, Enum):
    """Backend that produced a window id."""
    GNOME_EXTENSION = "gnome-extension"
    SWAY_IPC = "sway-ipc"
    WMCTRL = "wmctrl"
    XDOTOOL = "xdotool"


X11_SOURCES = frozenset({WindowSource.WMCTRL, WindowSource.XDOTOOL})


@dataclass(frozen=True)
class OpenWindow:
    """A window currently open on the desktop."""

    window_id: str
    title: str
    app_name: str
    source: WindowSource
    title_lower: str = field(init=False, repr=False, compare=False)
    app_name_lower: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "title_lower", self.title.lower())
        object.__setattr__(self, "app_name_lower", self.app_name.lower())

    @property
    def dedupe_key(self):
        return (self.title, self.app_name)


def _parse_x11_id(window: OpenWindow) -> Optional[int]:
    if window.source not in X11_SOURCES:
        return None
    raw = window.window_id.strip()
    try:
        if raw.lower().startswith("0x"):
            return int(raw, 16)
        return int(raw, 10)
    except ValueError:
        return None


def x11_hex_id(window: OpenWindow) -> Optional[str]:
    """Return the window's X11 id in wmctrl's hex form, or None.

    Args:
        window: Window to convert

    Returns:
        Hex id such as "0x03a00007", or None when the id is not an X11 id
        or cannot be parsed
    """
    value = _parse_x11_id(window)
    if value is None:
        return None
    return f"0x{value:08x}"


def x11_decimal_id(window: OpenWindow) -> Optional[str]:
    """Return the window's X11 id in xdotool's decimal form, or None."""
    value = _parse_x11_id(window)
    if value is None:
        return None
    return str(value)
