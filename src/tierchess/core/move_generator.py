"""Pseudo-legal move generation and the legality filter."""

from __future__ import annotations

from tierchess.core.attacks import (
    KING_TARGETS,
    KNIGHT_TARGETS,
    PAWN_ATTACKS,
    SLIDER_RAYS,
    is_in_check,
    is_square_attacked,
)
from tierchess.core.enums import CastlingRights, Color, PieceType
from tierchess.core.move import Move
from tierchess.core.piece import Piece
from tierchess.core.position import Position
from tierchess.core.transition import apply_move
from tierchess.core.types import Square, make_square, rank_of

# (right, king from, rook from, squares that must be empty, squares the king crosses)
_CastlingLane = tuple[
    CastlingRights, Square, Square, tuple[Square, ...], tuple[Square, ...]
]


def _build_castling_lanes(
    rank: int, kingside: CastlingRights, queenside: CastlingRights
) -> tuple[_CastlingLane, _CastlingLane]:
    sq = [make_square(f, rank) for f in range(8)]
    return (
        (kingside, sq[4], sq[7], (sq[5], sq[6]), (sq[5], sq[6])),
        (queenside, sq[4], sq[0], (sq[1], sq[2], sq[3]), (sq[3], sq[2])),
    )


_CASTLING_LANES: tuple[tuple[_CastlingLane, _CastlingLane], ...] = (
    _build_castling_lanes(0, CastlingRights.WHITE_KINGSIDE, CastlingRights.WHITE_QUEENSIDE),
    _build_castling_lanes(7, CastlingRights.BLACK_KINGSIDE, CastlingRights.BLACK_QUEENSIDE),
)

_PAWN_HOME_RANK: tuple[int, int] = (1, 6)


def can_land(mover: Piece, occupant: Piece | None) -> bool:
    """Landing rule: empty, enemy, or a friendly piece the mover merges with."""
    if occupant is None or occupant.color != mover.color:
        return True
    return mover.can_merge_with(occupant)


class MoveGenerator:
    """Generates destination squares for the pieces of a :class:`Position`.

    The position is never modified; every simulated move produces a scratch
    position through :func:`~tierchess.core.transition.apply_move`.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def pseudo_moves(self, sq: Square) -> set[Square]:
        """Destinations for the piece on *sq*, ignoring its own king's safety."""
        piece = self._board[sq]
        if piece is None:
            return set()

        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            return self._gen_pawn(sq, piece)
        if ptype == PieceType.KNIGHT:
            return self._gen_steps(sq, piece, KNIGHT_TARGETS[sq])
        if ptype == PieceType.KING:
            targets = self._gen_steps(sq, piece, KING_TARGETS[sq])
            targets |= self._gen_castling(sq, piece.color)
            return targets
        return self._gen_sliding(sq, piece)

    def legal_moves(self, sq: Square) -> set[Square]:
        """Strictly legal destinations for the side to move's piece on *sq*."""
        piece = self._board[sq]
        if piece is None or piece.color != self._pos.side_to_move:
            return set()
        return self._filter_legal(sq, piece.color)

    def all_legal_moves(self, color: Color) -> set[Move]:
        """Every legal move for *color*'s pieces."""
        return {
            Move(from_sq, to_sq)
            for from_sq in self._board.all_pieces(color)
            for to_sq in self._filter_legal(from_sq, color)
        }

    def has_legal_move(self, color: Color) -> bool:
        """Like ``bool(all_legal_moves(color))`` but stops at the first hit."""
        pos = self._pos
        for from_sq in self._board.all_pieces(color):
            for to_sq in self.pseudo_moves(from_sq):
                if not is_in_check(apply_move(pos, from_sq, to_sq), color):
                    return True
        return False

    # -- Legality filter (private) -----------------------------------------

    def _filter_legal(self, sq: Square, color: Color) -> set[Square]:
        pos = self._pos
        return {
            to_sq
            for to_sq in self.pseudo_moves(sq)
            if not is_in_check(apply_move(pos, sq, to_sq), color)
        }

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, pawn: Piece) -> set[Square]:
        board = self._board
        targets: set[Square] = set()
        step = 8 * pawn.color.forward

        one_step = sq + step
        if 0 <= one_step < 64 and board.is_empty(one_step):
            targets.add(one_step)
            two_step = one_step + step
            if rank_of(sq) == _PAWN_HOME_RANK[int(pawn.color)] and board.is_empty(
                two_step
            ):
                targets.add(two_step)

        for cap_sq in PAWN_ATTACKS[int(pawn.color)][sq]:
            occupant = board[cap_sq]
            if occupant is not None:
                if can_land(pawn, occupant):
                    targets.add(cap_sq)
            elif (
                cap_sq == self._pos.en_passant
                and pawn.color == self._pos.side_to_move
            ):
                targets.add(cap_sq)
        return targets

    def _gen_steps(
        self, sq: Square, piece: Piece, candidates: tuple[Square, ...]
    ) -> set[Square]:
        board = self._board
        return {to_sq for to_sq in candidates if can_land(piece, board[to_sq])}

    def _gen_sliding(self, sq: Square, piece: Piece) -> set[Square]:
        board = self._board
        targets: set[Square] = set()
        for ray in SLIDER_RAYS[piece.piece_type][sq]:
            for to_sq in ray:
                occupant = board[to_sq]
                if occupant is None:
                    targets.add(to_sq)
                    continue
                if can_land(piece, occupant):
                    targets.add(to_sq)
                break
        return targets

    def _gen_castling(self, king_sq: Square, color: Color) -> set[Square]:
        pos = self._pos
        board = self._board
        opponent = color.opposite
        rook = Piece(color, PieceType.ROOK)
        targets: set[Square] = set()

        for right, king_from, rook_from, between, crossed in _CASTLING_LANES[int(color)]:
            if king_sq != king_from or not pos.has_castling(right):
                continue
            if board[rook_from] != rook:
                continue
            if not all(board.is_empty(s) for s in between):
                continue
            if is_square_attacked(pos, king_sq, opponent):
                return set()
            if any(is_square_attacked(pos, s, opponent) for s in crossed):
                continue
            targets.add(crossed[-1])
        return targets


# -- Functional entry points ------------------------------------------------


def legal_moves(position: Position, sq: Square) -> set[Square]:
    """Legal destinations for the piece on *sq* (empty if none or not to move)."""
    return MoveGenerator(position).legal_moves(sq)


def all_legal_moves(color: Color, position: Position) -> set[Move]:
    """Every legal move for *color* in *position*."""
    return MoveGenerator(position).all_legal_moves(color)


def apply_human_move(
    position: Position, from_sq: Square, to_sq: Square
) -> Position | None:
    """Apply a requested move, or return ``None`` if it is not legal."""
    if to_sq not in legal_moves(position, from_sq):
        return None
    return apply_move(position, from_sq, to_sq)
