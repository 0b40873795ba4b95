"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from tierchess.core import INITIAL_POSITION, legal_moves, parse_square

    targets = legal_moves(INITIAL_POSITION, parse_square("g1"))
"""

from tierchess.core.attacks import is_in_check, is_square_attacked, king_square
from tierchess.core.board import Board
from tierchess.core.enums import CastlingRights, Color, GameStatus, PieceType
from tierchess.core.move import Move
from tierchess.core.move_generator import (
    MoveGenerator,
    all_legal_moves,
    apply_human_move,
    legal_moves,
)
from tierchess.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from tierchess.core.piece import Piece
from tierchess.core.position import INITIAL_POSITION, Position
from tierchess.core.rules import GameResult, Rules, classify
from tierchess.core.transition import apply_move
from tierchess.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "GameResult",
    "INITIAL_POSITION",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Engine operations
    "all_legal_moves",
    "apply_human_move",
    "apply_move",
    "classify",
    "is_in_check",
    "is_square_attacked",
    "king_square",
    "legal_moves",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
