"""
Candidate execution.

Maps each candidate kind to its side effect and runs it through a chain of
tools, so a missing tool only matters when every alternative is missing
too. Failures never escape as exceptions: ``execute`` always returns an
ExecutionOutcome.
"""

import logging
import shlex
from typing import Awaitable, Callable, Dict, List, Sequence

from ..config import ConfigStore
from ..core.app_discovery import clean_exec_command
from ..core.web_search import build_search_url
from ..errors import ErrorCode, ExecutionError, LauncherError, ProbeError
from ..models.application import DesktopApp
from ..models.candidates import (
    ApplicationCandidate,
    CalculatorResult,
    Candidate,
    EmojiCandidate,
    Notice,
    SearchQuery,
    SettingsEntry,
    TerminalCommand,
    WindowCandidate,
)
from ..models.state import ExecutionOutcome
from .process import CommandRunner
from .terminal_launcher import TerminalLauncher
from .window_switcher import WindowSwitcher


logger = logging.getLogger(__name__)

URL_OPENERS = (
    ["xdg-open"],
    ["gio", "open"],
    ["firefox"],
    ["google-chrome"],
    ["chromium"],
    ["brave-browser"],
)

WAYLAND_CLIPBOARD = (["wl-copy"],)
X11_CLIPBOARD = (
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
)

WAYLAND_TYPERS = (["wtype"],)
X11_TYPERS = (["xdotool", "type", "--clearmodifiers"],)

GIO_LAUNCH_TIMEOUT = 5.0


class ActionExecutor:
    """Runs the action behind a selected candidate."""

    def __init__(
        self,
        runner: CommandRunner,
        terminal: TerminalLauncher,
        switcher: WindowSwitcher,
        config_store: ConfigStore,
    ):
        self.runner = runner
        self.terminal = terminal
        self.switcher = switcher
        self.config_store = config_store
        self._handlers: Dict[str, Callable[[Candidate], Awaitable[str]]] = {
            ApplicationCandidate.kind: self._execute_application,
            CalculatorResult.kind: self._execute_calculator,
            EmojiCandidate.kind: self._execute_emoji,
            TerminalCommand.kind: self._execute_terminal,
            SearchQuery.kind: self._execute_search,
            WindowCandidate.kind: self._execute_window,
            SettingsEntry.kind: self._execute_settings,
            Notice.kind: self._execute_notice,
        }

    @property
    def on_wayland(self) -> bool:
        return bool(self.runner.env.get("WAYLAND_DISPLAY"))

    async def execute(self, candidate: Candidate) -> ExecutionOutcome:
        """Execute a candidate's action.

        Args:
            candidate: Candidate chosen by the user

        Returns:
            ExecutionOutcome describing success or the failure reason
        """
        handler = self._handlers.get(candidate.kind)
        if handler is None:
            return ExecutionOutcome(False, f"Unsupported result type: {candidate.kind}", ErrorCode.NOT_ACTIONABLE)

        try:
            message = await handler(candidate)
        except LauncherError as e:
            logger.warning(f"Executing {candidate.kind} '{candidate.title}' failed: {e.message}")
            return ExecutionOutcome.failed(e)

        logger.info(message)
        return ExecutionOutcome.ok(message)

    # Handlers return a success message and raise LauncherError on failure

    async def _execute_application(self, candidate: ApplicationCandidate) -> str:
        await self.launch_application(candidate.app)
        return f"Launched {candidate.app.name}"

    async def _execute_calculator(self, candidate: CalculatorResult) -> str:
        tool = await self.copy_to_clipboard(candidate.value)
        return f"Copied {candidate.value} to clipboard ({tool})"

    async def _execute_emoji(self, candidate: EmojiCandidate) -> str:
        glyph = candidate.emoji.glyph
        typers = WAYLAND_TYPERS + X11_TYPERS if self.on_wayland else X11_TYPERS + WAYLAND_TYPERS
        for typer in typers:
            try:
                result = await self.runner.run([*typer, glyph])
            except ProbeError as e:
                logger.debug(f"Emoji typing via {typer[0]} unavailable: {e.reason}")
                continue
            if result.ok:
                return f"Typed {glyph}"

        tool = await self.copy_to_clipboard(glyph)
        return f"Copied {glyph} to clipboard ({tool})"

    async def _execute_terminal(self, candidate: TerminalCommand) -> str:
        emulator = await self.terminal.run_command(candidate.command)
        return f"Running '{candidate.command}' in {emulator.name}"

    async def _execute_search(self, candidate: SearchQuery) -> str:
        try:
            url = build_search_url(candidate.engine, candidate.text)
        except (KeyError, ValueError):
            raise ExecutionError(f"Unknown search engine: {candidate.engine}", code=ErrorCode.NOT_ACTIONABLE)
        opener = self.open_url(url)
        return f"Opened {candidate.engine} search for '{candidate.text}' ({opener})"

    async def _execute_window(self, candidate: WindowCandidate) -> str:
        backend = await self.switcher.switch_to(candidate.window)
        return f"Switched to {candidate.window.title} ({backend})"

    async def _execute_settings(self, candidate: SettingsEntry) -> str:
        path = self.config_store.ensure_exists()
        opener = self.open_url(str(path))
        return f"Opened settings {path} ({opener})"

    async def _execute_notice(self, candidate: Notice) -> str:
        raise ExecutionError(candidate.message, code=ErrorCode.NOT_ACTIONABLE)

    # Collaborators

    async def launch_application(self, app: DesktopApp) -> None:
        """Launch a desktop application.

        Tries ``gio launch`` on the desktop file first, which honours every
        desktop-entry key; falls back to running the cleaned Exec line.

        Raises:
            ExecutionError: The application could not be started
        """
        argv = self._exec_argv(app)

        if app.terminal:
            await self.terminal.run_program(argv)
            return

        try:
            result = await self.runner.run(
                ["gio", "launch", str(app.desktop_file)],
                timeout=GIO_LAUNCH_TIMEOUT,
                capture_output=False,
            )
            if result.ok:
                return
            logger.debug(f"gio launch exited {result.returncode} for {app.desktop_file}")
        except ProbeError as e:
            logger.debug(f"gio launch unavailable: {e.reason}")

        self.runner.spawn(argv)

    def _exec_argv(self, app: DesktopApp) -> List[str]:
        try:
            argv = shlex.split(clean_exec_command(app.exec_command))
        except ValueError as e:
            raise ExecutionError(
                f"Invalid Exec line for {app.name}: {e}",
                context={"exec": app.exec_command}
            )
        if not argv:
            raise ExecutionError(f"Empty Exec line for {app.name}")
        return argv

    def open_url(self, url: str) -> str:
        """Open a URL or file with the first available opener.

        Returns:
            Name of the opener used

        Raises:
            ExecutionError: No opener is installed
        """
        for opener in URL_OPENERS:
            if self.runner.which(opener[0]) is None:
                continue
            self.runner.spawn([*opener, url])
            return opener[0]
        raise ExecutionError(
            f"No program available to open {url}",
            code=ErrorCode.URL_OPEN_FAILED,
            suggestion="Install xdg-utils"
        )

    async def copy_to_clipboard(self, text: str) -> str:
        """Put text on the clipboard.

        Returns:
            Name of the clipboard tool used

        Raises:
            ExecutionError: No clipboard tool worked
        """
        tools: Sequence[List[str]] = (
            WAYLAND_CLIPBOARD + X11_CLIPBOARD if self.on_wayland else X11_CLIPBOARD + WAYLAND_CLIPBOARD
        )
        for tool in tools:
            try:
                result = await self.runner.run(tool, input_text=text, capture_output=False)
            except ProbeError as e:
                logger.debug(f"Clipboard tool {tool[0]} unavailable: {e.reason}")
                continue
            if result.ok:
                return tool[0]
        raise ExecutionError(
            "No clipboard tool available",
            code=ErrorCode.CLIPBOARD_FAILED,
            suggestion="Install wl-clipboard (Wayland) or xclip (X11)"
        )
