"""High-level chess rules: checkmate, stalemate, draw detection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tierchess.core.attacks import is_in_check
from tierchess.core.enums import Color, GameStatus, PieceType
from tierchess.core.move_generator import MoveGenerator
from tierchess.core.position import Position
from tierchess.core.types import file_of, rank_of

FIFTY_MOVE_HALFMOVES = 100  # 100 half-moves = 50 full moves
REPETITION_LIMIT = 3


@dataclass(frozen=True, slots=True)
class GameResult:
    """Classification of a position; *loser* is set only for checkmate."""

    status: GameStatus
    loser: Color | None = None

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.ONGOING

    @property
    def is_draw(self) -> bool:
        return self.status.is_draw

    @property
    def winner(self) -> Color | None:
        return self.loser.opposite if self.loser is not None else None

    @classmethod
    def checkmate(cls, loser: Color) -> GameResult:
        return cls(GameStatus.CHECKMATE, loser)


ONGOING = GameResult(GameStatus.ONGOING)


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Order of precedence in classify():
    # mate/stalemate, 50-move rule, threefold repetition, insufficient material.

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return is_in_check(position, position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not MoveGenerator(position).has_legal_move(position.side_to_move)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return not MoveGenerator(position).has_legal_move(position.side_to_move)

    @staticmethod
    def is_fifty_move_rule(position: Position) -> bool:
        return position.halfmove_clock >= FIFTY_MOVE_HALFMOVES

    @staticmethod
    def repetition_count(position: Position, history: Iterable[Position] = ()) -> int:
        """How often *position* occurs in *history* plus the position itself."""
        key = position.key()
        return 1 + sum(1 for earlier in history if earlier.key() == key)

    @staticmethod
    def is_threefold_repetition(
        position: Position, history: Iterable[Position] = ()
    ) -> bool:
        return Rules.repetition_count(position, history) >= REPETITION_LIMIT

    @staticmethod
    def is_insufficient_material(position: Position) -> bool:
        """K vs K, K+minor vs K, or only kings and bishops all on one shade."""
        occupied = list(position.board.occupied())
        kings = [
            piece.color for _sq, piece in occupied if piece.piece_type == PieceType.KING
        ]
        others = [
            (sq, piece) for sq, piece in occupied if piece.piece_type != PieceType.KING
        ]
        if sorted(kings) != [Color.WHITE, Color.BLACK]:
            return False

        # K vs K
        if not others:
            return True

        # K+minor vs K
        if len(others) == 1 and others[0][1].piece_type == PieceType.KNIGHT:
            return True

        # Any number of bishops, either side, all on squares of one shade
        if all(piece.piece_type == PieceType.BISHOP for _sq, piece in others):
            shades = {(file_of(sq) + rank_of(sq)) % 2 for sq, _piece in others}
            return len(shades) == 1

        return False

    @staticmethod
    def classify(
        position: Position,
        history: Iterable[Position] = (),
        *,
        has_legal_move: bool | None = None,
    ) -> GameResult:
        """Determine the current game result.

        *history* holds earlier positions of the same game and is only
        consulted for repetition. Callers that already generated the side to
        move's moves pass *has_legal_move* to skip generating them again.
        """
        side = position.side_to_move
        if has_legal_move is None:
            has_legal_move = MoveGenerator(position).has_legal_move(side)
        if not has_legal_move:
            if is_in_check(position, side):
                return GameResult.checkmate(side)
            return GameResult(GameStatus.STALEMATE)

        if Rules.is_fifty_move_rule(position):
            return GameResult(GameStatus.FIFTY_MOVE_DRAW)

        if Rules.is_threefold_repetition(position, history):
            return GameResult(GameStatus.THREEFOLD_REPETITION)

        if Rules.is_insufficient_material(position):
            return GameResult(GameStatus.INSUFFICIENT_MATERIAL)

        return ONGOING


def classify(position: Position, history: Iterable[Position] = ()) -> GameResult:
    return Rules.classify(position, history)
