"""
Window backends (probes) for listing and activating open windows.

Each probe wraps one way of talking to the desktop:

- GnomeWindowCallsProbe: GNOME Shell "Window Calls" extension over D-Bus,
  the only way to see native Wayland windows under GNOME
- SwayIpcProbe: sway/i3 IPC through i3ipc
- WmctrlProbe: EWMH via ``wmctrl -l -x`` (X11 and XWayland windows)
- XdotoolProbe: ``xdotool`` window search, slowest X11 fallback

Probes raise ProbeError when their backend fails. Returning an empty list
means the backend worked but saw nothing. Output lines that cannot be
parsed are skipped.
"""

import asyncio
import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, List, Optional

from i3ipc.aio import Connection

from ..errors import ErrorCode, ProbeError
from ..models.window import OpenWindow, WindowSource, x11_decimal_id, x11_hex_id
from .process import CommandRunner


logger = logging.getLogger(__name__)

DEFAULT_MAX_WINDOWS = 100

GNOME_WINDOWS_DEST = "org.gnome.Shell"
GNOME_WINDOWS_PATH = "/org/gnome/Shell/Extensions/Windows"
GNOME_WINDOWS_IFACE = "org.gnome.Shell.Extensions.Windows"

_GVARIANT_STRING = re.compile(r"^\(\s*(['\"])(.*)\1,?\s*\)$", re.DOTALL)
_GVARIANT_ESCAPE = re.compile(r"\\(.)", re.DOTALL)


def app_name_from_class(wm_class: Optional[str], title: str = "") -> str:
    """Derive a display app name from a window class or app id.

    Uses the last dotted segment ("Navigator.firefox" -> "Firefox",
    "org.gnome.Nautilus" -> "Nautilus"). Without a class, falls back to
    the first word of the title.
    """
    segments = [s for s in (wm_class or "").split(".") if s.strip()]
    if segments:
        name = segments[-1].strip()
        return name[:1].upper() + name[1:]
    words = title.split()
    return words[0] if words else "Unknown"


def parse_wmctrl_output(output: str, limit: int = DEFAULT_MAX_WINDOWS) -> List[OpenWindow]:
    """Parse ``wmctrl -l -x`` output.

    Line format: ``<id> <desktop> <instance.Class> <host> <title...>``

    Args:
        output: wmctrl stdout
        limit: Maximum windows returned

    Returns:
        Parsed windows, malformed lines skipped
    """
    windows = []
    for line in output.splitlines():
        if len(windows) >= limit:
            break
        parts = line.split(None, 4)
        if len(parts) < 5 or not parts[0].lower().startswith("0x"):
            if line.strip():
                logger.debug(f"Skipping unparseable wmctrl line: {line!r}")
            continue
        window_id, _desktop, wm_class, _host, title = parts
        title = title.strip()
        windows.append(OpenWindow(
            window_id=window_id,
            title=title,
            app_name=app_name_from_class(wm_class, title),
            source=WindowSource.WMCTRL,
        ))
    return windows


def parse_gdbus_json(output: str) -> Any:
    """Decode the JSON string returned by a gdbus call.

    gdbus prints the reply as a GVariant tuple, e.g. ``('[{"id": 1}]',)``,
    with quotes and backslashes escaped.

    Raises:
        ValueError: Output is not a single-string tuple holding JSON
    """
    match = _GVARIANT_STRING.match(output.strip())
    if not match:
        raise ValueError("unexpected gdbus reply")
    payload = _GVARIANT_ESCAPE.sub(r"\1", match.group(2))
    return json.loads(payload)


def parse_gdbus_string(output: str) -> str:
    """Decode a plain string reply such as ``('Firefox',)``."""
    match = _GVARIANT_STRING.match(output.strip())
    if not match:
        raise ValueError("unexpected gdbus reply")
    return _GVARIANT_ESCAPE.sub(r"\1", match.group(2))


class WindowProbe(ABC):
    """One backend able to list and activate windows."""

    name: str = "probe"
    source: WindowSource

    def __init__(self, runner: CommandRunner, max_windows: int = DEFAULT_MAX_WINDOWS):
        self.runner = runner
        self.max_windows = max_windows

    @abstractmethod
    def is_available(self) -> bool:
        """Cheap check whether the backend can be used at all."""

    @abstractmethod
    async def try_enumerate(self) -> List[OpenWindow]:
        """List windows. Raises ProbeError when the backend fails."""

    @abstractmethod
    async def try_switch(self, window: OpenWindow) -> bool:
        """Activate a window.

        Returns:
            True when activated, False when this backend cannot handle the
            window's id or the activation was refused

        Raises:
            ProbeError: The backend itself failed (missing, timed out)
        """

    def _fail_on_status(self, result) -> None:
        if not result.ok:
            reason = result.stderr.strip() or f"exit status {result.returncode}"
            raise ProbeError(self.name, reason, ErrorCode.COMMAND_FAILED)


class GnomeWindowCallsProbe(WindowProbe):
    """GNOME Shell "Window Calls" extension over the session bus."""

    name = "gnome-window-calls"
    source = WindowSource.GNOME_EXTENSION

    def _gdbus(self, method: str, *args: str) -> List[str]:
        return [
            "gdbus", "call", "--session",
            "--dest", GNOME_WINDOWS_DEST,
            "--object-path", GNOME_WINDOWS_PATH,
            "--method", f"{GNOME_WINDOWS_IFACE}.{method}",
            *args,
        ]

    def is_available(self) -> bool:
        desktop = self.runner.env.get("XDG_CURRENT_DESKTOP", "").lower()
        return "gnome" in desktop and self.runner.which("gdbus") is not None

    async def try_enumerate(self) -> List[OpenWindow]:
        result = await self.runner.run(self._gdbus("List"))
        self._fail_on_status(result)

        try:
            entries = parse_gdbus_json(result.stdout)
        except ValueError as e:
            raise ProbeError(self.name, f"unreadable reply: {e}", ErrorCode.OUTPUT_UNPARSEABLE)
        if not isinstance(entries, list):
            raise ProbeError(self.name, "reply is not a window list", ErrorCode.OUTPUT_UNPARSEABLE)

        windows = []
        for entry in entries[:self.max_windows]:
            if not isinstance(entry, dict) or "id" not in entry:
                logger.debug(f"Skipping malformed window-calls entry: {entry!r}")
                continue
            window_id = str(entry["id"])
            title = entry.get("title")
            if title is None:
                title = await self._fetch_title(window_id)
            if title is None:
                continue
            wm_class = entry.get("wm_class") or entry.get("wm_class_instance")
            windows.append(OpenWindow(
                window_id=window_id,
                title=str(title).strip(),
                app_name=app_name_from_class(wm_class, str(title)),
                source=self.source,
            ))
        return windows

    async def _fetch_title(self, window_id: str) -> Optional[str]:
        # Older extension versions omit titles from List
        result = await self.runner.run(self._gdbus("GetTitle", window_id))
        if not result.ok:
            return None
        try:
            return parse_gdbus_string(result.stdout)
        except ValueError:
            logger.debug(f"Unreadable title reply for window {window_id}")
            return None

    async def try_switch(self, window: OpenWindow) -> bool:
        if window.source != self.source or not window.window_id.isdigit():
            return False
        result = await self.runner.run(self._gdbus("Activate", window.window_id))
        return result.ok


class SwayIpcProbe(WindowProbe):
    """sway / i3 IPC through i3ipc's asyncio connection."""

    name = "sway-ipc"
    source = WindowSource.SWAY_IPC

    def __init__(
        self,
        runner: CommandRunner,
        max_windows: int = DEFAULT_MAX_WINDOWS,
        connect: Optional[Callable[[], Awaitable[Any]]] = None,
    ):
        """
        Args:
            runner: Command runner (supplies environment and timeout)
            max_windows: Maximum windows returned
            connect: Coroutine factory returning a connected i3ipc connection
        """
        super().__init__(runner, max_windows)
        self._connect = connect or self._default_connect

    def _socket_path(self) -> Optional[str]:
        return self.runner.env.get("SWAYSOCK") or self.runner.env.get("I3SOCK")

    async def _default_connect(self):
        return await Connection(socket_path=self._socket_path(), auto_reconnect=False).connect()

    def is_available(self) -> bool:
        return self._socket_path() is not None

    async def _connection(self):
        try:
            return await asyncio.wait_for(self._connect(), timeout=self.runner.timeout)
        except asyncio.TimeoutError:
            raise ProbeError(self.name, "IPC connection timed out", ErrorCode.COMMAND_TIMEOUT)
        except Exception as e:
            # i3ipc raises bare Exception when the socket cannot be found
            raise ProbeError(self.name, f"cannot connect: {e}", ErrorCode.IPC_UNAVAILABLE)

    async def _request(self, request: Awaitable[Any], what: str):
        """Await one IPC request, mapping every failure to ProbeError."""
        try:
            return await asyncio.wait_for(request, timeout=self.runner.timeout)
        except asyncio.TimeoutError:
            raise ProbeError(self.name, f"{what} timed out", ErrorCode.COMMAND_TIMEOUT)
        except Exception as e:
            # Socket resets and malformed replies surface as assorted exceptions
            raise ProbeError(self.name, f"{what} failed: {e}", ErrorCode.IPC_UNAVAILABLE)

    async def try_enumerate(self) -> List[OpenWindow]:
        conn = await self._connection()
        try:
            tree = await self._request(conn.get_tree(), "get_tree")
        finally:
            disconnect(conn)

        windows = []
        for con in window_containers(tree):
            if len(windows) >= self.max_windows:
                break
            title = (con.name or "").strip()
            app_class = getattr(con, "app_id", None) or getattr(con, "window_class", None)
            windows.append(OpenWindow(
                window_id=str(con.id),
                title=title,
                app_name=app_name_from_class(app_class, title),
                source=self.source,
            ))
        return windows

    async def try_switch(self, window: OpenWindow) -> bool:
        if window.source != self.source or not window.window_id.isdigit():
            return False
        conn = await self._connection()
        try:
            replies = await self._request(
                conn.command(f"[con_id={window.window_id}] focus"), "focus command"
            )
        finally:
            disconnect(conn)
        return bool(replies) and all(reply.success for reply in replies)


def window_containers(tree) -> list:
    """Tiled leaves plus floating windows, which ``Con.leaves()`` leaves out."""
    containers = list(tree.leaves())
    seen = {con.id for con in containers}
    for con in tree.descendants():
        if con.type == "floating_con" and not con.nodes and con.id not in seen:
            containers.append(con)
            seen.add(con.id)
    return containers


def disconnect(conn) -> None:
    """Release both sockets of an i3ipc.aio connection.

    ``main_quit()`` only stops the event loop; the connection has no public
    close, so the reader and sockets opened by ``connect()`` are torn down here.
    """
    conn.main_quit()
    loop = getattr(conn, "_loop", None)
    sub_fd = getattr(conn, "_sub_fd", None)
    if loop is not None and sub_fd is not None:
        loop.remove_reader(sub_fd)
    for attr in ("_sub_socket", "_cmd_socket"):
        sock = getattr(conn, attr, None)
        if sock is not None:
            sock.close()


class WmctrlProbe(WindowProbe):
    """EWMH window list and activation through wmctrl."""

    name = "wmctrl"
    source = WindowSource.WMCTRL

    def is_available(self) -> bool:
        return self.runner.which("wmctrl") is not None

    async def try_enumerate(self) -> List[OpenWindow]:
        result = await self.runner.run(["wmctrl", "-l", "-x"])
        self._fail_on_status(result)
        return parse_wmctrl_output(result.stdout, self.max_windows)

    async def try_switch(self, window: OpenWindow) -> bool:
        hex_id = x11_hex_id(window)
        if hex_id is None:
            return False
        result = await self.runner.run(["wmctrl", "-i", "-a", hex_id])
        if result.ok:
            return True
        result = await self.runner.run(["wmctrl", "-a", hex_id])
        return result.ok


class XdotoolProbe(WindowProbe):
    """Window search and activation through xdotool."""

    name = "xdotool"
    source = WindowSource.XDOTOOL

    def is_available(self) -> bool:
        return self.runner.which("xdotool") is not None

    async def try_enumerate(self) -> List[OpenWindow]:
        result = await self.runner.run(["xdotool", "search", "--class", ""])
        if not result.ok:
            # xdotool exits 1 without output when the search matches nothing
            if result.returncode == 1 and not (result.stdout.strip() or result.stderr.strip()):
                return []
            self._fail_on_status(result)

        window_ids = [line.strip() for line in result.stdout.splitlines() if line.strip().isdigit()]

        windows = []
        for window_id in window_ids[:self.max_windows]:
            window = await self._describe(window_id)
            if window is not None:
                windows.append(window)
        return windows

    async def _describe(self, window_id: str) -> Optional[OpenWindow]:
        try:
            name_result = await self.runner.run(["xdotool", "getwindowname", window_id])
            class_result = await self.runner.run(["xdotool", "getwindowclassname", window_id])
        except ProbeError as e:
            logger.debug(f"Skipping xdotool window {window_id}: {e.message}")
            return None

        title = name_result.stdout.strip() if name_result.ok else ""
        if len(title) <= 1 or title == "N/A":
            return None
        wm_class = class_result.stdout.strip() if class_result.ok else ""
        return OpenWindow(
            window_id=window_id,
            title=title,
            app_name=app_name_from_class(wm_class, title),
            source=self.source,
        )

    async def try_switch(self, window: OpenWindow) -> bool:
        decimal_id = x11_decimal_id(window)
        if decimal_id is None:
            return False
        result = await self.runner.run(["xdotool", "windowactivate", decimal_id])
        return result.ok
