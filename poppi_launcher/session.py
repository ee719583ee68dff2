"""
Launcher session.

Owns the single LauncherState and wires the router, presenter and action
executor together. Query edits, navigation and activation all run under
the state lock, so they apply one at a time in arrival order. The
application catalog loads in a worker thread; until it arrives app
searches simply return nothing (and web search suggestions).
"""

import asyncio
import logging
from typing import List, Optional

from .config import ConfigStore
from .core.app_discovery import AppDiscovery, ApplicationIndex
from .core.emoji import EmojiIndex
from .models.candidates import Candidate, Mode
from .models.config import LauncherConfig
from .models.state import ExecutionOutcome, LauncherState
from .presentation import Direction, ResultPresenter
from .router import QueryRouter
from .services.actions import ActionExecutor
from .services.process import CommandRunner
from .services.terminal_launcher import TerminalLauncher, TerminalLocator
from .services.window_switcher import WindowEnumerator, WindowSwitcher, build_default_tiers


logger = logging.getLogger(__name__)


class LauncherSession:
    """One launcher instance: state plus the components acting on it."""

    def __init__(
        self,
        router: QueryRouter,
        presenter: ResultPresenter,
        discovery: AppDiscovery,
        state: Optional[LauncherState] = None,
    ):
        self.router = router
        self.presenter = presenter
        self.discovery = discovery
        self.state = state or LauncherState()
        self._load_task: Optional[asyncio.Task] = None

    @classmethod
    def create(
        cls,
        config: LauncherConfig,
        config_store: ConfigStore,
        runner: Optional[CommandRunner] = None,
        discovery: Optional[AppDiscovery] = None,
    ) -> "LauncherSession":
        """Build a session with the standard backends.

        Args:
            config: Loaded configuration
            config_store: Store the settings entry opens
            runner: Command runner (default: one using config timeouts)
            discovery: Application discovery (default: XDG data dirs)
        """
        runner = runner or CommandRunner(timeout=config.windows.probe_timeout)
        enumerator = WindowEnumerator(build_default_tiers(runner, config.windows.max_windows))
        switcher = WindowSwitcher(enumerator.probes)
        terminal = TerminalLauncher(
            runner,
            TerminalLocator(runner, override=config.terminal.command),
            hold_open=config.terminal.hold_open,
        )
        executor = ActionExecutor(runner, terminal, switcher, config_store)
        router = QueryRouter(config, EmojiIndex(), enumerator)
        presenter = ResultPresenter(config.display, executor)
        return cls(router, presenter, discovery or AppDiscovery())

    def start(self) -> asyncio.Task:
        """Start loading applications in the background (once)."""
        if self._load_task is None:
            self._load_task = asyncio.create_task(self._load_applications())
        return self._load_task

    async def wait_until_loaded(self) -> None:
        await self.start()

    async def _load_applications(self) -> None:
        try:
            apps = await asyncio.to_thread(self.discovery.discover_all)
        except OSError as e:
            logger.error(f"Application discovery failed: {e}")
            return

        index = ApplicationIndex(apps)
        async with self.state.lock:
            self.state.applications = index
            # Results computed before the catalog arrived are stale
            if self.state.mode == Mode.APPS:
                await self.router.route(self.state, self.state.query)
                self.presenter.present(self.state)
        logger.info(f"Application catalog ready ({len(index)} applications)")

    async def handle_query(self, text: str) -> List[Candidate]:
        """Process a query edit.

        Returns:
            The candidates now displayed
        """
        async with self.state.lock:
            await self.router.route(self.state, text)
            return list(self.presenter.present(self.state))

    async def navigate(self, direction: Direction) -> bool:
        async with self.state.lock:
            return self.presenter.move(self.state, direction)

    async def activate(self, index: Optional[int] = None) -> ExecutionOutcome:
        """Execute the selected candidate (or the displayed one at ``index``)."""
        async with self.state.lock:
            return await self.presenter.execute_selected(self.state, index)
