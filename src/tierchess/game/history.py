"""History stack of position snapshots used for undo and repetition."""

from __future__ import annotations

from collections.abc import Iterator

from tierchess.core.position import Position


class HistoryStack:
    """Append-only stack of :class:`Position` values.

    The stack owns its snapshots: ``push`` stores an independent copy, so
    nothing handed back to the caller aliases a stored board.
    """

    __slots__ = ("_snapshots",)

    def __init__(self) -> None:
        self._snapshots: list[Position] = []

    def push(self, position: Position) -> None:
        self._snapshots.append(position.copy())

    def pop(self) -> Position | None:
        """Remove and return the latest snapshot; ``None`` when empty."""
        if not self._snapshots:
            return None
        return self._snapshots.pop()

    def peek(self) -> Position | None:
        return self._snapshots[-1] if self._snapshots else None

    def clear(self) -> None:
        self._snapshots.clear()

    def positions(self) -> tuple[Position, ...]:
        """All snapshots, oldest first."""
        return tuple(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __bool__(self) -> bool:
        return bool(self._snapshots)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._snapshots)
