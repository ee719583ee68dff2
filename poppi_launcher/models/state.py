"""Launcher session state and execution outcomes."""

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from ..errors import ErrorCode, LauncherError
from .candidates import Candidate, Mode
from .window import OpenWindow

if TYPE_CHECKING:
    from ..core.app_discovery import ApplicationIndex


@dataclass
class ExecutionOutcome:
    """Result of executing a candidate's action."""

    success: bool
    message: str
    code: Optional[ErrorCode] = None

    @classmethod
    def ok(cls, message: str) -> "ExecutionOutcome":
        return cls(success=True, message=message)

    @classmethod
    def failed(cls, error: LauncherError) -> "ExecutionOutcome":
        message = error.message
        if error.suggestion:
            message = f"{message}. {error.suggestion}"
        return cls(success=False, message=message, code=error.code)

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "message": self.message,
            "code": self.code.value if self.code else None,
        }


@dataclass
class LauncherState:
    """Everything the router and presenter mutate between keystrokes.

    Owned by a single LauncherSession. ``lock`` serialises query handling
    and the one-shot swap of the application catalog.

    Invariant: ``selected_index < len(displayed_results)`` when
    displayed_results is non-empty, otherwise 0.
    """

    mode: Mode = Mode.APPS
    previous_mode: Mode = Mode.APPS
    query: str = ""
    results: List[Candidate] = field(default_factory=list)
    displayed_results: List[Candidate] = field(default_factory=list)
    selected_index: int = 0
    # None until the background load completes
    applications: Optional["ApplicationIndex"] = None
    cached_windows: List[OpenWindow] = field(default_factory=list)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False, compare=False)

    @property
    def applications_loaded(self) -> bool:
        return self.applications is not None
