"""Tests for HistoryStack."""

from tierchess.core.position import INITIAL_POSITION
from tierchess.core.transition import apply_move
from tierchess.core.types import E2, E4
from tierchess.game.history import HistoryStack


class TestHistoryStack:
    def test_empty(self) -> None:
        stack = HistoryStack()
        assert len(stack) == 0
        assert not stack
        assert stack.pop() is None
        assert stack.peek() is None

    def test_last_in_first_out(self) -> None:
        stack = HistoryStack()
        after = apply_move(INITIAL_POSITION, E2, E4)
        stack.push(INITIAL_POSITION)
        stack.push(after)
        assert len(stack) == 2
        assert stack.peek() == after
        assert stack.pop() == after
        assert stack.pop() == INITIAL_POSITION
        assert stack.pop() is None

    def test_push_stores_independent_copy(self) -> None:
        stack = HistoryStack()
        stack.push(INITIAL_POSITION)
        stored = stack.peek()
        assert stored == INITIAL_POSITION
        assert stored is not INITIAL_POSITION
        assert stored.board is not INITIAL_POSITION.board

    def test_positions_oldest_first(self) -> None:
        stack = HistoryStack()
        after = apply_move(INITIAL_POSITION, E2, E4)
        stack.push(INITIAL_POSITION)
        stack.push(after)
        assert stack.positions() == (INITIAL_POSITION, after)
        assert list(stack) == [INITIAL_POSITION, after]

    def test_clear(self) -> None:
        stack = HistoryStack()
        stack.push(INITIAL_POSITION)
        stack.clear()
        assert len(stack) == 0
