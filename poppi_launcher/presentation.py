"""Result presentation: display capping, selection cursor, execution."""

import logging
from enum import Enum
from typing import List, Optional

from .errors import ErrorCode
from .models.candidates import Candidate, Mode
from .models.config import DisplayConfig
from .models.state import ExecutionOutcome, LauncherState
from .services.actions import ActionExecutor


logger = logging.getLogger(__name__)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class ResultPresenter:
    """Caps results for display and tracks the highlighted row.

    Emoji mode is shown as a grid of ``emoji_grid_columns`` columns; every
    other mode is a vertical list.
    """

    def __init__(self, display: DisplayConfig, executor: ActionExecutor):
        self.display = display
        self.executor = executor

    def is_grid(self, mode: Mode) -> bool:
        return mode == Mode.EMOJI

    def display_limit(self, mode: Mode) -> int:
        if self.is_grid(mode):
            return self.display.emoji_grid_size
        return self.display.max_results

    def present(self, state: LauncherState) -> List[Candidate]:
        """Cap results for display and reset the selection to the first row."""
        state.displayed_results = list(state.results[:self.display_limit(state.mode)])
        state.selected_index = 0
        return state.displayed_results

    def selected(self, state: LauncherState) -> Optional[Candidate]:
        if 0 <= state.selected_index < len(state.displayed_results):
            return state.displayed_results[state.selected_index]
        return None

    def move(self, state: LauncherState, direction: Direction) -> bool:
        """Move the selection cursor.

        List mode: up/down by one row, clamped. Grid mode: up/down by one
        row of the grid, clamped; left/right by one cell, continuing onto
        the previous or next row at the row edges.

        Returns:
            Whether the key was handled
        """
        count = len(state.displayed_results)
        if count == 0:
            return False

        last = count - 1
        index = state.selected_index

        if self.is_grid(state.mode):
            columns = self.display.emoji_grid_columns
            if direction == Direction.DOWN:
                index = min(index + columns, last)
            elif direction == Direction.UP:
                index = max(index - columns, 0)
            elif direction == Direction.RIGHT:
                index = min(index + 1, last)
            else:
                index = max(index - 1, 0)
        else:
            if direction == Direction.DOWN:
                index = min(index + 1, last)
            elif direction == Direction.UP:
                index = max(index - 1, 0)
            else:
                return False

        state.selected_index = index
        return True

    async def execute_selected(self, state: LauncherState, index: Optional[int] = None) -> ExecutionOutcome:
        """Execute the highlighted candidate, or the one at ``index``.

        Returns:
            ExecutionOutcome; a failure when nothing valid is selected
        """
        if index is None:
            index = state.selected_index
        if not 0 <= index < len(state.displayed_results):
            return ExecutionOutcome(False, "Nothing selected", ErrorCode.NOTHING_SELECTED)

        candidate = state.displayed_results[index]
        logger.debug(f"Executing {candidate.kind} '{candidate.title}'")
        return await self.executor.execute(candidate)
