"""
Error handling for Poppi Launcher.

Structured error codes shared by the router, the resource probes and the
action executor. Errors raised by collaborators are absorbed by the router
(turned into candidates) or by the executor (turned into failed outcomes).
"""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(Enum):
    """
    Error codes for Poppi Launcher.

    Code ranges:
    - 1100-1199: Configuration errors
    - 1200-1299: Resource probe errors (external tools, IPC)
    - 1300-1399: Window enumeration and switching errors
    - 1400-1499: Terminal discovery errors
    - 1500-1599: Calculator errors
    - 1600-1699: Execution errors
    """

    # Configuration errors (1100-1199)
    CONFIG_LOAD_FAILED = 1100
    CONFIG_INVALID = 1101
    CONFIG_WRITE_FAILED = 1102

    # Probe errors (1200-1299)
    COMMAND_NOT_FOUND = 1200
    COMMAND_TIMEOUT = 1201
    COMMAND_FAILED = 1202
    IPC_UNAVAILABLE = 1203
    OUTPUT_UNPARSEABLE = 1204

    # Window errors (1300-1399)
    WINDOW_ENUMERATION_FAILED = 1300
    WINDOW_SWITCH_FAILED = 1301

    # Terminal errors (1400-1499)
    TERMINAL_NOT_FOUND = 1400

    # Calculator errors (1500-1599)
    EVALUATION_FAILED = 1500

    # Execution errors (1600-1699)
    LAUNCH_FAILED = 1600
    NOTHING_SELECTED = 1601
    NOT_ACTIONABLE = 1602
    CLIPBOARD_FAILED = 1603
    URL_OPEN_FAILED = 1604


class LauncherError(Exception):
    """Base exception for launcher errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize launcher error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            suggestion: Suggested recovery action
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for JSON output.

        Returns:
            Error dictionary with code, message, suggestion, and context
        """
        result = {
            "code": self.code.value,
            "message": self.message
        }

        if self.suggestion:
            result["suggestion"] = self.suggestion

        if self.context:
            result["context"] = self.context

        return result


class ConfigError(LauncherError):
    """Configuration loading or validation error."""

    def __init__(self, file_path: str, reason: str, code: ErrorCode = ErrorCode.CONFIG_LOAD_FAILED):
        super().__init__(
            code=code,
            message=f"Failed to load configuration from {file_path}: {reason}",
            suggestion="Check file syntax, or delete it to regenerate defaults",
            context={"file_path": file_path, "reason": reason}
        )


class ProbeError(LauncherError):
    """An external tool or IPC endpoint could not be used."""

    def __init__(self, backend: str, reason: str, code: ErrorCode = ErrorCode.COMMAND_FAILED):
        """
        Initialize probe error.

        Args:
            backend: Name of the tool or IPC backend (e.g. "wmctrl")
            reason: Why the probe failed
            code: Specific probe error code
        """
        self.backend = backend
        self.reason = reason
        super().__init__(
            code=code,
            message=f"{backend}: {reason}",
            context={"backend": backend}
        )


class WindowEnumerationError(LauncherError):
    """Every window backend failed or returned nothing."""

    def __init__(self, failures: Dict[str, str]):
        """
        Initialize enumeration error.

        Args:
            failures: Mapping of backend name to its failure reason
        """
        self.failures = dict(failures)
        details = "; ".join(f"{name}: {reason}" for name, reason in self.failures.items())
        super().__init__(
            code=ErrorCode.WINDOW_ENUMERATION_FAILED,
            message=f"Could not list open windows ({details or 'no backends available'})",
            suggestion="Try: wmctrl -l",
            context={"failures": self.failures}
        )


class WindowSwitchError(LauncherError):
    """No backend could activate the requested window."""

    def __init__(self, window_id: str, attempts: Dict[str, str]):
        self.attempts = dict(attempts)
        super().__init__(
            code=ErrorCode.WINDOW_SWITCH_FAILED,
            message=f"Could not switch to window {window_id}",
            suggestion="Install wmctrl or xdotool, or the GNOME 'Window Calls' extension on Wayland",
            context={"window_id": window_id, "attempts": self.attempts}
        )


class TerminalNotFoundError(LauncherError):
    """No usable terminal emulator was found."""

    def __init__(self, tried: list):
        super().__init__(
            code=ErrorCode.TERMINAL_NOT_FOUND,
            message="No terminal emulator available",
            suggestion="Set $TERMINAL or terminal.command in the launcher config",
            context={"tried": list(tried)}
        )


class EvaluationError(LauncherError):
    """Arithmetic expression could not be evaluated."""

    def __init__(self, expression: str, reason: str):
        self.expression = expression
        super().__init__(
            code=ErrorCode.EVALUATION_FAILED,
            message=f"Cannot evaluate '{expression}': {reason}",
            context={"expression": expression}
        )


class ExecutionError(LauncherError):
    """Executing a candidate's action failed."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.LAUNCH_FAILED,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(code=code, message=message, suggestion=suggestion, context=context)
