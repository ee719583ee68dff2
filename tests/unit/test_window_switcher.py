"""
Unit tests for tiered window enumeration and the switch chain.
"""

import pytest

from poppi_launcher.errors import ErrorCode, WindowEnumerationError, WindowSwitchError
from poppi_launcher.models.window import WindowSource
from poppi_launcher.services.process import CommandRunner
from poppi_launcher.services.window_probes import (
    GnomeWindowCallsProbe,
    SwayIpcProbe,
    WmctrlProbe,
    XdotoolProbe,
)
from poppi_launcher.services.window_switcher import WindowEnumerator, WindowSwitcher, build_default_tiers

from tests.fixtures.fakes import FakeProbe, make_window


class TestDefaultTiers:
    """Test the standard backend chain."""

    def test_tier_order(self):
        """Test the default backend tiers and their order."""
        tiers = build_default_tiers(CommandRunner(), max_windows=10)

        assert [[type(p) for p in tier] for tier in tiers] == [
            [GnomeWindowCallsProbe, SwayIpcProbe],
            [WmctrlProbe],
            [XdotoolProbe],
        ]
        assert all(p.max_windows == 10 for tier in tiers for p in tier)

    def test_probes_flattened_in_priority_order(self):
        """Test switching tries backends in tier order."""
        first, second, third = FakeProbe("a"), FakeProbe("b"), FakeProbe("c")
        enumerator = WindowEnumerator([[first, second], [third]])
        assert enumerator.probes == (first, second, third)


class TestWindowEnumerator:
    """Test fallback between backend tiers."""

    @pytest.mark.asyncio
    async def test_first_working_tier_wins(self, sample_windows):
        """Test later tiers are not consulted once a tier has windows."""
        ipc = FakeProbe("sway-ipc", windows=sample_windows, source=WindowSource.SWAY_IPC)
        wmctrl = FakeProbe("wmctrl", windows=[make_window("Other Window")])

        result = await WindowEnumerator([[ipc], [wmctrl]]).enumerate()

        assert result.windows == sample_windows
        assert result.backends == ["sway-ipc"]
        assert wmctrl.enumerate_calls == 0

    @pytest.mark.asyncio
    async def test_failed_tier_falls_through(self, sample_windows):
        """Test a tier whose backends fail hands over to the next tier."""
        gnome = FakeProbe("gnome-window-calls", error="extension not installed")
        sway = FakeProbe("sway-ipc", available=False)
        wmctrl = FakeProbe("wmctrl", windows=sample_windows)

        result = await WindowEnumerator([[gnome, sway], [wmctrl]]).enumerate()

        assert result.backends == ["wmctrl"]
        assert len(result.windows) == 3
        assert sway.enumerate_calls == 0

    @pytest.mark.asyncio
    async def test_tier_with_only_hidden_windows_falls_through(self):
        """Test a tier seeing only hidden windows counts as empty."""
        panel_only = FakeProbe("wmctrl", windows=[make_window("Top Panel", "Waybar"), make_window("ab")])
        xdotool = FakeProbe("xdotool", windows=[make_window("Terminal", "Kitty")])

        result = await WindowEnumerator([[panel_only], [xdotool]]).enumerate()

        assert [w.title for w in result.windows] == ["Terminal"]

    @pytest.mark.asyncio
    async def test_ipc_backends_merged_and_deduplicated(self):
        """Test every IPC backend in the tier contributes, duplicates dropped."""
        gnome = FakeProbe("gnome-window-calls", windows=[
            make_window("Files", "Nautilus", "11", WindowSource.GNOME_EXTENSION),
        ])
        sway = FakeProbe("sway-ipc", windows=[
            make_window("Files", "Nautilus", "4", WindowSource.SWAY_IPC),
            make_window("Terminal", "Foot", "5", WindowSource.SWAY_IPC),
        ])

        result = await WindowEnumerator([[gnome, sway]]).enumerate()

        assert [w.window_id for w in result.windows] == ["11", "5"]
        assert result.backends == ["gnome-window-calls", "sway-ipc"]

    @pytest.mark.asyncio
    async def test_all_backends_failing(self):
        """Test WindowEnumerationError names every failed backend."""
        gnome = FakeProbe("gnome-window-calls", available=False)
        wmctrl = FakeProbe("wmctrl", error="command not found")
        xdotool = FakeProbe("xdotool", windows=[])

        with pytest.raises(WindowEnumerationError) as exc_info:
            await WindowEnumerator([[gnome], [wmctrl], [xdotool]]).enumerate()

        error = exc_info.value
        assert error.code == ErrorCode.WINDOW_ENUMERATION_FAILED
        assert error.failures == {
            "gnome-window-calls": "not available",
            "wmctrl": "command not found",
            "xdotool": "no visible windows",
        }
        assert error.suggestion == "Try: wmctrl -l"


class TestWindowSwitcher:
    """Test the activation chain."""

    @pytest.mark.asyncio
    async def test_first_accepting_backend_wins(self):
        """Test the first backend that focuses the window is reported."""
        window = make_window("Mozilla Firefox", "Firefox", "0x03a00007")
        gnome = FakeProbe("gnome-window-calls", switches=False)
        wmctrl = FakeProbe("wmctrl", switches=True)
        xdotool = FakeProbe("xdotool", switches=True)

        backend = await WindowSwitcher([gnome, wmctrl, xdotool]).switch_to(window)

        assert backend == "wmctrl"
        assert gnome.switch_calls == [window]
        assert xdotool.switch_calls == []

    @pytest.mark.asyncio
    async def test_failing_backend_skipped(self):
        """Test a failing backend does not stop the next one."""
        window = make_window("Mozilla Firefox")
        wmctrl = FakeProbe("wmctrl", error="timed out after 1.0s")
        xdotool = FakeProbe("xdotool", switches=True)

        assert await WindowSwitcher([wmctrl, xdotool]).switch_to(window) == "xdotool"

    @pytest.mark.asyncio
    async def test_unavailable_backend_not_tried(self):
        """Test unavailable backends are skipped."""
        window = make_window("Mozilla Firefox")
        missing = FakeProbe("wmctrl", available=False, switches=True)
        xdotool = FakeProbe("xdotool", switches=True)

        assert await WindowSwitcher([missing, xdotool]).switch_to(window) == "xdotool"
        assert missing.switch_calls == []

    @pytest.mark.asyncio
    async def test_no_backend_switches(self):
        """Test WindowSwitchError when no backend succeeds."""
        window = make_window("Mozilla Firefox", window_id="0x01")
        wmctrl = FakeProbe("wmctrl", error="cannot open display")
        xdotool = FakeProbe("xdotool", switches=False)

        with pytest.raises(WindowSwitchError) as exc_info:
            await WindowSwitcher([wmctrl, xdotool]).switch_to(window)

        assert exc_info.value.code == ErrorCode.WINDOW_SWITCH_FAILED
        assert exc_info.value.attempts == {
            "wmctrl": "cannot open display",
            "xdotool": "not applicable or refused",
        }
