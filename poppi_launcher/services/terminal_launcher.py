"""
Terminal Launcher Service

Finds a usable terminal emulator and runs shell commands in it.

Discovery order (first installed executable wins):
    1. Explicit override: launcher config ``terminal.command``, then $TERMINAL
    2. System default: the ``x-terminal-emulator`` alternative, resolved to
       the real emulator so the right command-line convention is used
    3. Desktop environment preference (GNOME gsettings, KDE kreadconfig)
    4. A fixed list of common emulators
"""

import logging
import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from ..errors import ProbeError, TerminalNotFoundError
from .process import CommandRunner


logger = logging.getLogger(__name__)

FALLBACK_TERMINALS = (
    "gnome-terminal",
    "tilix",
    "alacritty",
    "kitty",
    "konsole",
    "xterm",
    "termite",
    "ghostty",
    "foot",
    "wezterm",
    "xfce4-terminal",
)

# Arguments placed between the emulator and the program it should run
EXEC_PREFIXES = {
    "gnome-terminal": ["--"],
    "kgx": ["--"],
    "kitty": [],
    "foot": [],
    "wezterm": ["start", "--"],
    "xfce4-terminal": ["-x"],
    "terminator": ["-x"],
}
DEFAULT_EXEC_PREFIX = ["-e"]

# Emulators whose -e takes the whole command line as one string
JOINED_EXEC = frozenset({"tilix", "termite"})

GNOME_DESKTOPS = ("gnome", "unity", "cinnamon", "budgie")


@dataclass(frozen=True)
class TerminalEmulator:
    """A discovered terminal emulator."""

    name: str
    executable: str
    origin: str

    def command_for(self, program: Sequence[str]) -> List[str]:
        """Build argv that opens this terminal running ``program``.

        Args:
            program: Program and arguments to run inside the terminal

        Returns:
            Full command list

        Example for kitty:
            ["/usr/bin/kitty", "/bin/bash", "-c", "htop"]

        Example for gnome-terminal:
            ["/usr/bin/gnome-terminal", "--", "/bin/bash", "-c", "htop"]
        """
        if self.name in JOINED_EXEC:
            return [self.executable, "-e", shlex.join(program)]
        prefix = EXEC_PREFIXES.get(self.name, DEFAULT_EXEC_PREFIX)
        return [self.executable, *prefix, *program]


def _emulator_name(executable: str) -> str:
    name = Path(executable).name
    # Debian alternatives point at e.g. gnome-terminal.wrapper
    for suffix in (".wrapper", ".real"):
        if name.endswith(suffix):
            name = name[: -len(suffix)]
    return name


class TerminalLocator:
    """Finds a terminal emulator through the discovery chain."""

    def __init__(self, runner: CommandRunner, override: Optional[str] = None):
        """
        Args:
            runner: Command runner (PATH lookups and preference probes)
            override: Terminal configured by the user, highest priority
        """
        self.runner = runner
        self.override = override
        self._cached: Optional[TerminalEmulator] = None

    def _resolve(self, value: Optional[str], origin: str) -> Optional[TerminalEmulator]:
        if not value or not value.strip():
            return None
        try:
            program = shlex.split(value)[0]
        except (ValueError, IndexError):
            return None
        executable = self.runner.which(program)
        if executable is None:
            logger.debug(f"Terminal '{program}' from {origin} is not installed")
            return None
        return TerminalEmulator(name=_emulator_name(executable), executable=executable, origin=origin)

    def _system_default(self) -> Optional[TerminalEmulator]:
        link = self.runner.which("x-terminal-emulator")
        if link is None:
            return None
        target = os.path.realpath(link)
        name = _emulator_name(target)
        executable = self.runner.which(name) or target
        return TerminalEmulator(name=_emulator_name(executable), executable=executable, origin="system-default")

    async def _desktop_preference(self) -> Optional[TerminalEmulator]:
        desktop = self.runner.env.get("XDG_CURRENT_DESKTOP", "").lower()

        if any(name in desktop for name in GNOME_DESKTOPS):
            commands = [["gsettings", "get", "org.gnome.desktop.default-applications.terminal", "exec"]]
        elif "kde" in desktop:
            commands = [
                [tool, "--file", "kdeglobals", "--group", "General", "--key", "TerminalApplication"]
                for tool in ("kreadconfig6", "kreadconfig5")
            ]
        else:
            return None

        for argv in commands:
            try:
                result = await self.runner.run(argv)
            except ProbeError as e:
                logger.debug(f"Terminal preference probe failed: {e.message}")
                continue
            if not result.ok:
                continue
            value = result.stdout.strip().strip("'\"")
            emulator = self._resolve(value, "desktop-preference")
            if emulator is not None:
                return emulator
        return None

    async def locate(self) -> TerminalEmulator:
        """Return the terminal emulator to use.

        Raises:
            TerminalNotFoundError: No step of the chain found an installed emulator
        """
        if self._cached is not None:
            return self._cached

        tried = []
        if self.override:
            tried.append(self.override)
        emulator = self._resolve(self.override, "config")
        if emulator is None:
            env_terminal = self.runner.env.get("TERMINAL")
            if env_terminal:
                tried.append(f"$TERMINAL={env_terminal}")
            emulator = self._resolve(env_terminal, "environment")
        if emulator is None:
            tried.append("x-terminal-emulator")
            emulator = self._system_default()
        if emulator is None:
            tried.append("desktop-preference")
            emulator = await self._desktop_preference()
        if emulator is None:
            for name in FALLBACK_TERMINALS:
                emulator = self._resolve(name, "fallback")
                if emulator is not None:
                    break
            tried.extend(FALLBACK_TERMINALS)

        if emulator is None:
            logger.error("No terminal emulator found")
            raise TerminalNotFoundError(tried)

        logger.info(f"Selected terminal {emulator.name} ({emulator.origin})")
        self._cached = emulator
        return emulator


class TerminalLauncher:
    """Runs commands inside the discovered terminal emulator."""

    def __init__(self, runner: CommandRunner, locator: TerminalLocator, hold_open: bool = True):
        self.runner = runner
        self.locator = locator
        self.hold_open = hold_open

    @property
    def shell(self) -> str:
        return self.runner.env.get("SHELL") or "/bin/bash"

    def shell_program(self, command: str) -> List[str]:
        """Shell invocation for a command line, optionally keeping the shell open."""
        script = command
        if self.hold_open:
            script = f"{command}; exec {shlex.quote(self.shell)}"
        return [self.shell, "-c", script]

    async def build_command(self, command: str) -> List[str]:
        emulator = await self.locator.locate()
        return emulator.command_for(self.shell_program(command))

    async def run_command(self, command: str) -> TerminalEmulator:
        """Open a terminal running ``command``.

        Raises:
            TerminalNotFoundError: No terminal emulator available
            ExecutionError: The terminal could not be started
        """
        emulator = await self.locator.locate()
        self.runner.spawn(emulator.command_for(self.shell_program(command)))
        return emulator

    async def run_program(self, argv: Sequence[str]) -> TerminalEmulator:
        """Open a terminal running a program directly (Terminal=true apps)."""
        emulator = await self.locator.locate()
        self.runner.spawn(emulator.command_for(list(argv)))
        return emulator
