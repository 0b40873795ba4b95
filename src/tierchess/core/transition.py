"""Transition function: apply one (from, to) move and derive the next position."""

from __future__ import annotations

from tierchess.core.enums import CastlingRights, Color, PieceType
from tierchess.core.piece import Piece
from tierchess.core.position import Position
from tierchess.core.types import (
    A1,
    A8,
    C1,
    C8,
    D1,
    D8,
    E1,
    E8,
    F1,
    F8,
    G1,
    G8,
    H1,
    H8,
    Square,
    file_of,
    make_square,
    rank_of,
)

ROOK_HOMES: dict[Square, CastlingRights] = {
    A1: CastlingRights.WHITE_QUEENSIDE,
    H1: CastlingRights.WHITE_KINGSIDE,
    A8: CastlingRights.BLACK_QUEENSIDE,
    H8: CastlingRights.BLACK_KINGSIDE,
}

# (king from, king to) -> (rook from, rook to)
CASTLING_ROOK_HOPS: dict[tuple[Square, Square], tuple[Square, Square]] = {
    (E1, G1): (H1, F1),
    (E1, C1): (A1, D1),
    (E8, G8): (H8, F8),
    (E8, C8): (A8, D8),
}

_KING_RIGHTS: tuple[CastlingRights, CastlingRights] = (
    CastlingRights.WHITE_BOTH,
    CastlingRights.BLACK_BOTH,
)


def last_rank(color: Color) -> int:
    return 7 if color == Color.WHITE else 0


def apply_move(position: Position, from_sq: Square, to_sq: Square) -> Position:
    """Return the position reached by moving the piece on *from_sq* to *to_sq*.

    Callers pass vetted moves, except the legality filter which feeds every
    pseudo-legal pair through here. An empty *from_sq* yields *position*
    itself.
    """
    piece = position.board[from_sq]
    if piece is None:
        return position

    board = position.board.copy()
    target = board[to_sq]
    board[from_sq] = None
    is_pawn = piece.piece_type == PieceType.PAWN

    # Clocks
    if is_pawn or target is not None:
        halfmove_clock = 0
    else:
        halfmove_clock = position.halfmove_clock + 1

    # En passant: the captured pawn sits one rank behind the target square
    if is_pawn and to_sq == position.en_passant and target is None:
        board[make_square(file_of(to_sq), rank_of(to_sq) - piece.color.forward)] = None

    # Castling rights and the rook slide
    castling = position.castling
    if piece.piece_type == PieceType.KING:
        castling &= ~_KING_RIGHTS[int(piece.color)]
        hop = CASTLING_ROOK_HOPS.get((from_sq, to_sq))
        if hop is not None:
            rook_from, rook_to = hop
            rook = board[rook_from]
            if rook == Piece(piece.color, PieceType.ROOK):
                board[rook_from] = None
                board[rook_to] = rook

    for sq in (from_sq, to_sq):
        corner_right = ROOK_HOMES.get(sq)
        if corner_right is not None:
            castling &= ~corner_right

    # Self-capture-and-transform, then auto-queen (which wins)
    placed = piece
    if target is not None and piece.can_merge_with(target):
        next_tier = piece.piece_type.next_tier
        assert next_tier is not None
        placed = Piece(piece.color, next_tier)
    if is_pawn and rank_of(to_sq) == last_rank(piece.color):
        placed = Piece(piece.color, PieceType.QUEEN)

    en_passant: Square | None = None
    if is_pawn and abs(rank_of(to_sq) - rank_of(from_sq)) == 2:
        en_passant = make_square(file_of(from_sq), (rank_of(from_sq) + rank_of(to_sq)) // 2)

    board[to_sq] = placed

    fullmove_number = position.fullmove_number
    if position.side_to_move == Color.BLACK:
        fullmove_number += 1

    return Position(
        board=board,
        side_to_move=position.side_to_move.opposite,
        castling=castling,
        en_passant=en_passant,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
    )
