"""
Window enumeration and switching over ordered backend chains.

Backends are grouped in tiers, tried in order:

1. IPC tier: GNOME Window Calls extension, sway/i3 IPC
2. wmctrl
3. xdotool

Every probe that succeeds within a tier contributes windows; the merged
list is filtered for user-visible windows and deduplicated by
(title, app name). The first tier producing a non-empty list wins. A tier
that errors or finds nothing falls through to the next one.

Switching walks every probe in the same order. Each probe decides whether
it can handle the window's id (based on which backend produced it) and
the first successful activation wins.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from ..errors import ProbeError, WindowEnumerationError, WindowSwitchError
from ..models.window import OpenWindow
from .process import CommandRunner
from .window_filter import dedupe_windows, filter_visible
from .window_probes import (
    DEFAULT_MAX_WINDOWS,
    GnomeWindowCallsProbe,
    SwayIpcProbe,
    WindowProbe,
    WmctrlProbe,
    XdotoolProbe,
)


logger = logging.getLogger(__name__)

ProbeTiers = Tuple[Tuple[WindowProbe, ...], ...]


def build_default_tiers(runner: CommandRunner, max_windows: int = DEFAULT_MAX_WINDOWS) -> ProbeTiers:
    """Create the standard backend chain."""
    return (
        (GnomeWindowCallsProbe(runner, max_windows), SwayIpcProbe(runner, max_windows)),
        (WmctrlProbe(runner, max_windows),),
        (XdotoolProbe(runner, max_windows),),
    )


@dataclass
class EnumerationResult:
    """Windows found and the backends that produced them."""

    windows: List[OpenWindow]
    backends: List[str]


class WindowEnumerator:
    """Lists open windows through the first working backend tier."""

    def __init__(self, tiers: Sequence[Sequence[WindowProbe]]):
        self.tiers: ProbeTiers = tuple(tuple(tier) for tier in tiers)

    @property
    def probes(self) -> Tuple[WindowProbe, ...]:
        """All probes in priority order."""
        return tuple(probe for tier in self.tiers for probe in tier)

    async def enumerate(self) -> EnumerationResult:
        """List user-visible open windows.

        Returns:
            EnumerationResult from the first tier with visible windows

        Raises:
            WindowEnumerationError: Every backend was unavailable, failed
                or found no visible windows
        """
        failures: Dict[str, str] = {}

        for tier in self.tiers:
            collected: List[OpenWindow] = []
            contributors: List[str] = []

            for probe in tier:
                if not probe.is_available():
                    logger.debug(f"Window backend {probe.name} not available")
                    failures[probe.name] = "not available"
                    continue
                try:
                    windows = await probe.try_enumerate()
                except ProbeError as e:
                    logger.warning(f"Window backend {probe.name} failed: {e.reason}")
                    failures[probe.name] = e.reason
                    continue

                visible = filter_visible(windows)
                logger.debug(f"{probe.name}: {len(windows)} windows, {len(visible)} visible")
                if visible:
                    collected.extend(visible)
                    contributors.append(probe.name)
                else:
                    failures[probe.name] = "no visible windows"

            unique = dedupe_windows(collected)
            if unique:
                logger.info(f"Listed {len(unique)} windows via {', '.join(contributors)}")
                return EnumerationResult(windows=unique, backends=contributors)

        raise WindowEnumerationError(failures)


class WindowSwitcher:
    """Activates a window through the first backend that accepts it."""

    def __init__(self, probes: Sequence[WindowProbe]):
        self.probes: Tuple[WindowProbe, ...] = tuple(probes)

    async def switch_to(self, window: OpenWindow) -> str:
        """Focus a window.

        Args:
            window: Window from a previous enumeration

        Returns:
            Name of the backend that activated it

        Raises:
            WindowSwitchError: No backend could activate the window
        """
        attempts: Dict[str, str] = {}

        for probe in self.probes:
            if not probe.is_available():
                continue
            try:
                switched = await probe.try_switch(window)
            except ProbeError as e:
                logger.warning(f"{probe.name} could not switch to {window.window_id}: {e.reason}")
                attempts[probe.name] = e.reason
                continue

            if switched:
                logger.info(f"Switched to window {window.window_id} ({window.title!r}) via {probe.name}")
                return probe.name
            attempts.setdefault(probe.name, "not applicable or refused")

        raise WindowSwitchError(window.window_id, attempts)
