"""
Subprocess execution for resource probes and actions.

Probes run external tools (wmctrl, xdotool, gdbus, gsettings, ...) with a
hard timeout so a hung tool can never stall query handling. Actions spawn
long-lived programs detached from the launcher.
"""

import asyncio
import logging
import os
import shutil
import subprocess
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from ..errors import ErrorCode, ExecutionError, ProbeError
from ..logging_config import log_subprocess_call


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 1.0


@dataclass
class CommandResult:
    """Finished subprocess."""

    argv: Sequence[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner:
    """Runs external commands with timeouts and spawns detached processes."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, env: Optional[Mapping[str, str]] = None):
        """
        Args:
            timeout: Default seconds allowed per command
            env: Environment used for lookups and children (default: os.environ)
        """
        self.timeout = timeout
        self.env = env if env is not None else os.environ

    def which(self, name: str) -> Optional[str]:
        """Resolve an executable on PATH."""
        return shutil.which(name, path=self.env.get("PATH"))

    async def run(
        self,
        argv: Sequence[str],
        timeout: Optional[float] = None,
        input_text: Optional[str] = None,
        capture_output: bool = True,
    ) -> CommandResult:
        """Run a command to completion.

        Args:
            argv: Command and arguments
            timeout: Seconds allowed (default: runner timeout)
            input_text: Text written to the command's stdin
            capture_output: Collect stdout/stderr. Disable for tools that
                fork a daemon holding the pipes open (xclip, wl-copy)

        Returns:
            CommandResult (a non-zero exit status is not an error here)

        Raises:
            ProbeError: Executable missing, not startable, or timed out
        """
        timeout = self.timeout if timeout is None else timeout
        backend = argv[0]

        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.PIPE if input_text is not None else asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE if capture_output else asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE if capture_output else asyncio.subprocess.DEVNULL,
                env=dict(self.env),
            )
        except FileNotFoundError:
            raise ProbeError(backend, "command not found", ErrorCode.COMMAND_NOT_FOUND)
        except OSError as e:
            raise ProbeError(backend, f"cannot start: {e}", ErrorCode.COMMAND_FAILED)

        try:
            stdout, stderr = await asyncio.wait_for(
                proc.communicate(input_text.encode() if input_text is not None else None),
                timeout=timeout
            )
        except asyncio.TimeoutError:
            logger.warning(f"{backend} timed out after {timeout}s")
            proc.kill()
            await proc.wait()
            raise ProbeError(backend, f"timed out after {timeout}s", ErrorCode.COMMAND_TIMEOUT)

        result = CommandResult(
            argv=list(argv),
            returncode=proc.returncode,
            stdout=(stdout or b"").decode('utf-8', errors='replace'),
            stderr=(stderr or b"").decode('utf-8', errors='replace'),
        )
        log_subprocess_call(argv, result, logger)
        return result

    def spawn(self, argv: Sequence[str]) -> None:
        """Start a program detached from the launcher.

        Raises:
            ExecutionError: The program could not be started
        """
        logger.debug(f"Spawning: {' '.join(argv)}")
        try:
            subprocess.Popen(
                list(argv),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
                env=dict(self.env),
            )
        except OSError as e:
            raise ExecutionError(
                f"Failed to start {argv[0]}: {e}",
                code=ErrorCode.LAUNCH_FAILED,
                context={"argv": list(argv)}
            )
