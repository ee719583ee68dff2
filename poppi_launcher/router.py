"""
Query routing.

Classifies every query edit into a launcher mode and fills the session
state with that mode's ranked candidates. Rules are checked in priority
order against the trimmed query and the first match wins:

1. empty query            -> applications in name order
2. settings keywords      -> the settings entry
3. "sw" / "switch"        -> open windows (enumerated lazily, cached)
4. engine prefixes        -> a web search candidate
5. "emoji " or ":"        -> emoji grid
6. arithmetic             -> calculator result (app search on failure)
7. shell commands         -> terminal command
8. anything else          -> application search, web searches if empty

Leaving window-switch mode drops the cached window list, so re-entering it
always enumerates fresh windows. Routing never raises: collaborator
failures become fallbacks or notice candidates.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .core.calculator import calculate, looks_like_calculation
from .core.emoji import EmojiIndex
from .core.terminal import looks_like_terminal_command, terminal_command_text
from .core.web_search import fallback_engines, match_search_prefix
from .core.window_index import WindowIndex
from .errors import EvaluationError, WindowEnumerationError
from .models.candidates import (
    ApplicationCandidate,
    CalculatorResult,
    Candidate,
    EmojiCandidate,
    Mode,
    Notice,
    SearchQuery,
    SettingsEntry,
    TerminalCommand,
    WindowCandidate,
)
from .models.config import LauncherConfig
from .models.state import LauncherState
from .services.window_switcher import WindowEnumerator


logger = logging.getLogger(__name__)

SETTINGS_KEYWORDS = ("settings", "poppi settings")
WINDOW_SWITCH_KEYWORDS = ("sw", "switch")
EMOJI_WORD_PREFIX = "emoji "
EMOJI_SHORT_PREFIX = ":"

NO_WINDOWS_MESSAGE = "No open windows found"


def match_keyword(query: str, keywords: Sequence[str]) -> Optional[str]:
    """Return the text after a keyword, or None.

    A keyword matches when the query equals it or starts with it followed
    by a space. Matching ignores case.
    """
    lowered = query.lower()
    for keyword in keywords:
        if lowered == keyword:
            return ""
        if lowered.startswith(keyword + " "):
            return query[len(keyword) + 1:].strip()
    return None


def match_emoji_prefix(query: str) -> Optional[str]:
    """Return the emoji search text after "emoji " or ":", or None."""
    if query.lower().startswith(EMOJI_WORD_PREFIX):
        return query[len(EMOJI_WORD_PREFIX):].strip()
    if query.startswith(EMOJI_SHORT_PREFIX):
        return query[len(EMOJI_SHORT_PREFIX):].strip()
    return None


class QueryRouter:
    """Turns query text into a mode and ranked candidates."""

    def __init__(
        self,
        config: LauncherConfig,
        emoji_index: EmojiIndex,
        window_enumerator: WindowEnumerator,
    ):
        self.config = config
        self.emoji_index = emoji_index
        self.window_enumerator = window_enumerator

    async def route(self, state: LauncherState, query: str) -> None:
        """Classify a query edit and update the state in place.

        Sets mode, results and query, resets the selection and drops the
        window cache when leaving window-switch mode.

        Args:
            state: Session state (caller holds state.lock)
            query: Raw query text as typed
        """
        mode, results = await self.classify(state, query.strip())

        state.previous_mode = state.mode
        state.mode = mode
        if state.previous_mode == Mode.WINDOW_SWITCH and mode != Mode.WINDOW_SWITCH:
            logger.debug("Leaving window switch mode, clearing window cache")
            state.cached_windows = []

        state.query = query
        state.results = results
        state.selected_index = 0
        logger.debug(f"Routed {query!r} to {mode.value} with {len(results)} results")

    async def classify(self, state: LauncherState, text: str) -> Tuple[Mode, List[Candidate]]:
        """Apply the routing rules to a trimmed query."""
        if not text:
            return Mode.APPS, self._application_results(state, "")

        if match_keyword(text, SETTINGS_KEYWORDS) is not None:
            return Mode.APPS, [SettingsEntry()]

        window_query = match_keyword(text, WINDOW_SWITCH_KEYWORDS)
        if window_query is not None:
            return Mode.WINDOW_SWITCH, await self._window_results(state, window_query)

        search = match_search_prefix(text)
        if search is not None and self.config.search.is_enabled(search[0].value):
            engine, search_text = search
            return Mode.SEARCH, [SearchQuery(engine=engine.value, text=search_text)]

        emoji_query = match_emoji_prefix(text)
        if emoji_query is not None:
            limit = self.config.display.emoji_grid_size
            return Mode.EMOJI, [EmojiCandidate(e) for e, _ in self.emoji_index.search(emoji_query, limit)]

        if self.config.calculator.enabled and looks_like_calculation(text):
            try:
                value = calculate(text, self.config.calculator.precision)
            except EvaluationError as e:
                logger.debug(f"Not a calculation: {e.message}")
            else:
                return Mode.CALCULATOR, [CalculatorResult(expression=text, value=value)]
            return Mode.APPS, self._default_results(state, text)

        if looks_like_terminal_command(text):
            return Mode.TERMINAL, [TerminalCommand(command=terminal_command_text(text))]

        return Mode.APPS, self._default_results(state, text)

    def _application_results(self, state: LauncherState, text: str) -> List[Candidate]:
        if state.applications is None:
            return []
        return [ApplicationCandidate(app) for app, _ in state.applications.search(text)]

    def _default_results(self, state: LauncherState, text: str) -> List[Candidate]:
        results = self._application_results(state, text)
        if results:
            return results
        return [
            SearchQuery(engine=engine.value, text=text)
            for engine in fallback_engines(self.config.search.default_engine)
            if self.config.search.is_enabled(engine.value)
        ]

    async def _window_results(self, state: LauncherState, text: str) -> List[Candidate]:
        failure: Optional[Notice] = None

        if not state.cached_windows:
            try:
                result = await self.window_enumerator.enumerate()
            except WindowEnumerationError as e:
                logger.warning(e.message)
                failure = Notice(message=f"Error: {e.message}. {e.suggestion}", level="error")
            else:
                state.cached_windows = list(result.windows)

        if not state.cached_windows:
            return [failure or Notice(message=NO_WINDOWS_MESSAGE, level="info")]

        index = WindowIndex(state.cached_windows)
        return [WindowCandidate(window) for window, _ in index.search(text)]
