"""Data models for Poppi Launcher."""

from .application import DesktopApp
from .candidates import (
    ApplicationCandidate,
    CalculatorResult,
    Candidate,
    EmojiCandidate,
    Mode,
    Notice,
    SearchQuery,
    SettingsEntry,
    TerminalCommand,
    WindowCandidate,
    candidate_to_dict,
)
from .config import LauncherConfig
from .emoji import Emoji
from .state import ExecutionOutcome, LauncherState
from .window import OpenWindow, WindowSource, x11_decimal_id, x11_hex_id

__all__ = [
    "ApplicationCandidate",
    "CalculatorResult",
    "Candidate",
    "DesktopApp",
    "Emoji",
    "EmojiCandidate",
    "ExecutionOutcome",
    "LauncherConfig",
    "LauncherState",
    "Mode",
    "Notice",
    "OpenWindow",
    "SearchQuery",
    "SettingsEntry",
    "TerminalCommand",
    "WindowCandidate",
    "WindowSource",
    "candidate_to_dict",
    "x11_decimal_id",
    "x11_hex_id",
]
