"""Pytest configuration and shared fixtures for launcher tests.

Nothing here touches the real desktop: external commands go through
FakeRunner and window backends through FakeProbe.
"""

import pytest

from poppi_launcher.config import ConfigStore
from poppi_launcher.core.app_discovery import ApplicationIndex
from poppi_launcher.core.emoji import EmojiIndex
from poppi_launcher.models.config import LauncherConfig
from poppi_launcher.models.state import LauncherState
from poppi_launcher.presentation import ResultPresenter
from poppi_launcher.router import QueryRouter
from poppi_launcher.services.actions import ActionExecutor
from poppi_launcher.services.terminal_launcher import TerminalLauncher, TerminalLocator
from poppi_launcher.services.window_switcher import WindowEnumerator, WindowSwitcher

from tests.fixtures.fakes import FakeProbe, FakeRunner, make_app, make_window


@pytest.fixture
def fake_runner():
    """Runner with no tools installed."""
    return FakeRunner()


@pytest.fixture
def sample_apps():
    """A small desktop: browser, editor, file manager and friends."""
    return [
        make_app("Firefox", "Browse the World Wide Web", "firefox %u"),
        make_app("Files", "Access and organize files", "nautilus --new-window %U"),
        make_app("Visual Studio Code", "Code Editing. Redefined.", "code %F"),
        make_app("GIMP", "Create images and edit photographs", "gimp-2.10 %U"),
        make_app("Thunderbird", "Send and receive mail", "thunderbird %u"),
        make_app("Terminal", "Use the command line", "gnome-terminal"),
        make_app("htop", "Show system processes", "htop", terminal=True),
        make_app("Calculator", "Perform arithmetic calculations", "gnome-calculator"),
    ]


@pytest.fixture
def app_index(sample_apps):
    return ApplicationIndex(sample_apps)


@pytest.fixture
def sample_windows():
    return [
        make_window("Mozilla Firefox", "Firefox", "0x03a00007"),
        make_window("main.py - project - Visual Studio Code", "Code", "0x04200003"),
        make_window("Inbox - Thunderbird", "Thunderbird", "0x05000010"),
    ]


@pytest.fixture
def launcher_config():
    return LauncherConfig()


@pytest.fixture
def config_store(tmp_path):
    return ConfigStore(tmp_path / "config" / "config.json")


@pytest.fixture
def loaded_state(app_index):
    """State whose application catalog has finished loading."""
    state = LauncherState()
    state.applications = app_index
    return state


@pytest.fixture
def window_probe(sample_windows):
    return FakeProbe("wmctrl", windows=sample_windows)


@pytest.fixture
def router(launcher_config, window_probe):
    return QueryRouter(launcher_config, EmojiIndex(), WindowEnumerator([[window_probe]]))


@pytest.fixture
def executor(fake_runner, config_store, window_probe):
    terminal = TerminalLauncher(fake_runner, TerminalLocator(fake_runner))
    return ActionExecutor(fake_runner, terminal, WindowSwitcher([window_probe]), config_store)


@pytest.fixture
def presenter(launcher_config, executor):
    return ResultPresenter(launcher_config.display, executor)


@pytest.fixture
def desktop_dir(tmp_path):
    """Directory with a mix of valid, hidden and broken desktop entries."""
    apps_dir = tmp_path / "applications"
    apps_dir.mkdir()

    entries = {
        "firefox.desktop": (
            "[Desktop Entry]\nType=Application\nName=Firefox\n"
            "Comment=Browse the World Wide Web\nExec=firefox %u\nIcon=firefox\n"
        ),
        "htop.desktop": (
            "[Desktop Entry]\nType=Application\nName=htop\nExec=htop\nTerminal=true\n"
        ),
        "generic.desktop": (
            "[Desktop Entry]\nType=Application\nGenericName=Image Viewer\nExec=viewer %f\n"
        ),
        "hidden.desktop": (
            "[Desktop Entry]\nType=Application\nName=Hidden Tool\nExec=hidden\nNoDisplay=true\n"
        ),
        "removed.desktop": (
            "[Desktop Entry]\nType=Application\nName=Removed\nExec=removed\nHidden=true\n"
        ),
        "noexec.desktop": (
            "[Desktop Entry]\nType=Application\nName=No Exec\n"
        ),
        "link.desktop": (
            "[Desktop Entry]\nType=Link\nName=Website\nURL=https://example.com\n"
        ),
        "broken.desktop": "this is not a desktop entry\n",
    }
    for filename, content in entries.items():
        (apps_dir / filename).write_text(content)

    return apps_dir
