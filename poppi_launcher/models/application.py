"""Application records parsed from desktop entries."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class DesktopApp:
    """Represents an application from a .desktop file.

    Lowercased search fields are derived once at construction so ranking
    never lowercases per keystroke.
    """

    name: str
    exec_command: str
    desktop_file: Path
    icon: Optional[str] = None
    comment: Optional[str] = None
    terminal: bool = False
    name_lower: str = field(init=False, repr=False, compare=False)
    comment_lower: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Application name cannot be empty")
        if not self.exec_command:
            raise ValueError(f"Application '{self.name}' has no Exec command")
        object.__setattr__(self, "name_lower", self.name.lower())
        object.__setattr__(self, "comment_lower", (self.comment or "").lower())

    @property
    def desktop_id(self) -> str:
        """Desktop file id (file name), used to shadow duplicate entries."""
        return self.desktop_file.name
