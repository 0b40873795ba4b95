"""Static evaluation from the computer side's point of view."""

from __future__ import annotations

from tierchess.core.attacks import is_in_check
from tierchess.core.enums import Color, GameStatus, PieceType
from tierchess.core.position import Position
from tierchess.core.rules import GameResult, Rules

MATE_SCORE = 100_000
CHECK_BONUS = 20

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 100,
    PieceType.KNIGHT: 320,
    PieceType.BISHOP: 330,
    PieceType.ROOK: 500,
    PieceType.QUEEN: 900,
    PieceType.KING: 20_000,
}


class Evaluator:
    """Scores positions; positive values favour *computer_color*."""

    __slots__ = ("_computer",)

    def __init__(self, computer_color: Color) -> None:
        self._computer = computer_color

    @property
    def computer_color(self) -> Color:
        return self._computer

    def evaluate(self, position: Position, result: GameResult | None = None) -> int:
        """Score *position*; pass *result* when it is already classified."""
        if result is None:
            result = Rules.classify(position)

        if result.status == GameStatus.CHECKMATE:
            return -MATE_SCORE if result.loser == self._computer else MATE_SCORE
        if result.is_draw:
            return 0

        score = self.material(position)

        human = self._computer.opposite
        if is_in_check(position, human):
            score += CHECK_BONUS
        if is_in_check(position, self._computer):
            score -= CHECK_BONUS
        return score

    def material(self, position: Position) -> int:
        """Material balance; kings carry a nominal value but are not counted."""
        score = 0
        for _sq, piece in position.board.occupied():
            if piece.piece_type == PieceType.KING:
                continue
            value = PIECE_VALUES[piece.piece_type]
            score += value if piece.color == self._computer else -value
        return score
