"""Poppi Launcher - keystroke-driven launcher for Linux desktops.

This package provides:
- Query classification into launcher modes (apps, calculator, emoji,
  terminal commands, web search, window switching)
- Fuzzy subsequence ranking of applications, emoji and open windows
- Window listing and switching over GNOME, sway/i3 and X11 backends
- Terminal emulator discovery
"""

__version__ = "0.3.0"
__author__ = "Poppi Launcher contributors"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__license__"]
