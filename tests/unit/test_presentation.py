"""
Unit tests for display capping, selection movement and execution.
"""

import pytest

from poppi_launcher.core.emoji import EmojiIndex
from poppi_launcher.errors import ErrorCode
from poppi_launcher.models.candidates import EmojiCandidate, Mode, Notice, TerminalCommand
from poppi_launcher.models.state import LauncherState
from poppi_launcher.presentation import Direction


def state_with(mode, results):
    state = LauncherState(mode=mode)
    state.results = list(results)
    return state


class TestPresent:
    """Test display capping."""

    @pytest.mark.asyncio
    async def test_list_mode_capped_at_five(self, router, presenter, loaded_state):
        """Test list modes display at most five rows."""
        await router.route(loaded_state, "")
        displayed = presenter.present(loaded_state)

        assert len(loaded_state.results) == 8
        assert len(displayed) == 5
        assert displayed == loaded_state.results[:5]

    @pytest.mark.asyncio
    async def test_emoji_grid_capped_at_grid_size(self, router, presenter, loaded_state):
        """Test the emoji grid shows one full grid of cells."""
        await router.route(loaded_state, ":")
        assert len(presenter.present(loaded_state)) == 24

    def test_selection_reset(self, presenter):
        """Test presenting new results selects the first row."""
        state = state_with(Mode.TERMINAL, [TerminalCommand("ls")])
        state.selected_index = 4

        presenter.present(state)

        assert state.selected_index == 0
        assert presenter.selected(state) == TerminalCommand("ls")

    def test_nothing_selected_when_empty(self, presenter):
        """Test there is no selection without results."""
        state = state_with(Mode.APPS, [])
        presenter.present(state)
        assert presenter.selected(state) is None


class TestListNavigation:
    """Test vertical list movement."""

    @pytest.fixture
    def state(self, presenter):
        state = state_with(Mode.APPS, [TerminalCommand(f"cmd{i}") for i in range(8)])
        presenter.present(state)
        return state

    def test_down_clamps_at_last_row(self, presenter, state):
        """Test moving down stops on the last visible row."""
        for _ in range(10):
            assert presenter.move(state, Direction.DOWN)
        assert state.selected_index == 4

    def test_up_clamps_at_first_row(self, presenter, state):
        """Test moving up stops on the first row."""
        presenter.move(state, Direction.DOWN)
        presenter.move(state, Direction.UP)
        presenter.move(state, Direction.UP)
        assert state.selected_index == 0

    def test_left_right_not_handled(self, presenter, state):
        """Test horizontal keys are left to the text field in list modes."""
        assert not presenter.move(state, Direction.RIGHT)
        assert not presenter.move(state, Direction.LEFT)
        assert state.selected_index == 0

    def test_empty_list(self, presenter):
        """Test navigation is a no-op without results."""
        state = state_with(Mode.APPS, [])
        presenter.present(state)
        assert not presenter.move(state, Direction.DOWN)


class TestGridNavigation:
    """Test emoji grid movement (8 columns, 24 cells)."""

    @pytest.fixture
    def state(self, presenter):
        emoji = EmojiIndex().search("", limit=24)
        state = state_with(Mode.EMOJI, [EmojiCandidate(e) for e, _ in emoji])
        presenter.present(state)
        return state

    def test_down_moves_one_row(self, presenter, state):
        """Test down jumps one grid row."""
        presenter.move(state, Direction.DOWN)
        assert state.selected_index == 8
        presenter.move(state, Direction.DOWN)
        assert state.selected_index == 16

    def test_down_clamps_to_last_cell(self, presenter, state):
        """Test down from the last row lands on the last cell."""
        state.selected_index = 20
        presenter.move(state, Direction.DOWN)
        assert state.selected_index == 23

    def test_up_clamps_to_first_cell(self, presenter, state):
        """Test up from the first row lands on the first cell."""
        state.selected_index = 3
        presenter.move(state, Direction.UP)
        assert state.selected_index == 0

    def test_right_continues_on_next_row(self, presenter, state):
        """Test right wraps from the end of a row to the next one."""
        state.selected_index = 7
        assert presenter.move(state, Direction.RIGHT)
        assert state.selected_index == 8

    def test_left_stops_at_first_cell(self, presenter, state):
        """Test left does nothing on the first cell."""
        assert presenter.move(state, Direction.LEFT)
        assert state.selected_index == 0


class TestExecuteSelected:
    """Test executing the highlighted row."""

    @pytest.mark.asyncio
    async def test_executes_selected_candidate(self, presenter, fake_runner):
        """Test the highlighted candidate is executed."""
        fake_runner.installed.add("kitty")
        state = state_with(Mode.TERMINAL, [TerminalCommand("htop")])
        presenter.present(state)

        outcome = await presenter.execute_selected(state)

        assert outcome.success
        assert fake_runner.spawned[0][0] == "/usr/bin/kitty"

    @pytest.mark.asyncio
    async def test_explicit_index(self, presenter, fake_runner):
        """Test an explicit index overrides the selection."""
        fake_runner.installed.add("kitty")
        state = state_with(Mode.APPS, [Notice("first"), TerminalCommand("top")])
        presenter.present(state)

        outcome = await presenter.execute_selected(state, index=1)

        assert outcome.success
        assert outcome.message == "Running 'top' in kitty"

    @pytest.mark.asyncio
    async def test_nothing_to_execute(self, presenter):
        """Test NOTHING_SELECTED without results."""
        state = state_with(Mode.APPS, [])
        presenter.present(state)

        outcome = await presenter.execute_selected(state)

        assert not outcome.success
        assert outcome.code == ErrorCode.NOTHING_SELECTED

    @pytest.mark.asyncio
    async def test_index_out_of_range(self, presenter):
        """Test an index past the displayed rows is rejected."""
        state = state_with(Mode.TERMINAL, [TerminalCommand("ls")])
        presenter.present(state)

        outcome = await presenter.execute_selected(state, index=5)
        assert outcome.code == ErrorCode.NOTHING_SELECTED

    @pytest.mark.asyncio
    async def test_notice_not_executed(self, presenter, fake_runner):
        """Test a selected notice reports its message instead of running."""
        state = state_with(Mode.WINDOW_SWITCH, [Notice("No open windows found")])
        presenter.present(state)

        outcome = await presenter.execute_selected(state)

        assert outcome.code == ErrorCode.NOT_ACTIONABLE
        assert fake_runner.spawned == []
