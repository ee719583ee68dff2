"""Launcher modes and result candidates.

A candidate is one actionable result row. Every variant is a frozen
dataclass with a ``kind`` tag, and the executor dispatches on that tag.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Literal, Union

from .application import DesktopApp
from .emoji import Emoji
from .window import OpenWindow


class Mode(str, Enum):
    """Interpretation of the current query."""
    APPS = "apps"
    CALCULATOR = "calculator"
    EMOJI = "emoji"
    TERMINAL = "terminal"
    SEARCH = "search"
    WINDOW_SWITCH = "window_switch"


@dataclass(frozen=True)
class ApplicationCandidate:
    app: DesktopApp
    kind: ClassVar[str] = "application"

    @property
    def title(self) -> str:
        return self.app.name

    @property
    def subtitle(self) -> str:
        return self.app.comment or ""


@dataclass(frozen=True)
class CalculatorResult:
    expression: str
    value: str
    kind: ClassVar[str] = "calculator"

    @property
    def title(self) -> str:
        return self.value

    @property
    def subtitle(self) -> str:
        return f"{self.expression} (Enter to copy)"


@dataclass(frozen=True)
class EmojiCandidate:
    emoji: Emoji
    kind: ClassVar[str] = "emoji"

    @property
    def title(self) -> str:
        return self.emoji.glyph

    @property
    def subtitle(self) -> str:
        return self.emoji.name


@dataclass(frozen=True)
class TerminalCommand:
    command: str
    kind: ClassVar[str] = "terminal"

    @property
    def title(self) -> str:
        return self.command

    @property
    def subtitle(self) -> str:
        return "Run in terminal"


@dataclass(frozen=True)
class SearchQuery:
    engine: str
    text: str
    kind: ClassVar[str] = "search"

    @property
    def title(self) -> str:
        return f"Search {self.engine.capitalize()}: {self.text}"

    @property
    def subtitle(self) -> str:
        return f"Open {self.engine} in browser"


@dataclass(frozen=True)
class WindowCandidate:
    window: OpenWindow
    kind: ClassVar[str] = "window"

    @property
    def title(self) -> str:
        return self.window.title

    @property
    def subtitle(self) -> str:
        return self.window.app_name


@dataclass(frozen=True)
class SettingsEntry:
    kind: ClassVar[str] = "settings"

    @property
    def title(self) -> str:
        return "Poppi Settings"

    @property
    def subtitle(self) -> str:
        return "Open the launcher configuration file"


@dataclass(frozen=True)
class Notice:
    """Informational or error row. Never executable."""

    message: str
    level: Literal["info", "error"] = "info"
    kind: ClassVar[str] = "notice"

    @property
    def title(self) -> str:
        return self.message

    @property
    def subtitle(self) -> str:
        return self.level


Candidate = Union[
    ApplicationCandidate,
    CalculatorResult,
    EmojiCandidate,
    TerminalCommand,
    SearchQuery,
    WindowCandidate,
    SettingsEntry,
    Notice,
]


def candidate_to_dict(candidate: Candidate) -> Dict[str, Any]:
    """Serialise a candidate for JSON output.

    Args:
        candidate: Any candidate variant

    Returns:
        Dictionary with kind, title, subtitle and variant-specific fields
    """
    data: Dict[str, Any] = {
        "kind": candidate.kind,
        "title": candidate.title,
        "subtitle": candidate.subtitle,
    }
    if isinstance(candidate, ApplicationCandidate):
        data["desktop_file"] = str(candidate.app.desktop_file)
        data["exec"] = candidate.app.exec_command
    elif isinstance(candidate, CalculatorResult):
        data["expression"] = candidate.expression
        data["value"] = candidate.value
    elif isinstance(candidate, EmojiCandidate):
        data["glyph"] = candidate.emoji.glyph
        data["keywords"] = list(candidate.emoji.keywords)
    elif isinstance(candidate, TerminalCommand):
        data["command"] = candidate.command
    elif isinstance(candidate, SearchQuery):
        data["engine"] = candidate.engine
        data["text"] = candidate.text
    elif isinstance(candidate, WindowCandidate):
        data["window_id"] = candidate.window.window_id
        data["app_name"] = candidate.window.app_name
        data["source"] = candidate.window.source.value
    elif isinstance(candidate, Notice):
        data["level"] = candidate.level
    return data
