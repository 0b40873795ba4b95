"""Attack detection and the precomputed geometry shared with move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tierchess.core.enums import Color, PieceType
from tierchess.core.types import Square, make_square

if TYPE_CHECKING:
    from tierchess.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        targets.append(
            tuple(
                make_square(file_idx + df, rank_idx + dr)
                for df, dr in offsets
                if 0 <= file_idx + df < 8 and 0 <= rank_idx + dr < 8
            )
        )
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = (sq & 7) + df
            ar = (sq >> 3) + dr
            ray: list[Square] = []
            while 0 <= af < 8 and 0 <= ar < 8:
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_attacks(color: Color) -> tuple[tuple[Square, ...], ...]:
    """Squares a pawn of *color* standing on each square attacks."""
    return _build_targets(((-1, color.forward), (1, color.forward)))


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
PAWN_ATTACKS: tuple[tuple[tuple[Square, ...], ...], ...] = (
    _build_pawn_attacks(Color.WHITE),
    _build_pawn_attacks(Color.BLACK),
)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

SLIDER_RAYS: dict[PieceType, tuple[tuple[tuple[Square, ...], ...], ...]] = {
    PieceType.BISHOP: BISHOP_RAYS,
    PieceType.ROOK: ROOK_RAYS,
    PieceType.QUEEN: QUEEN_RAYS,
}


# -- Public API ---------------------------------------------------------------


def attacks_square(position: Position, from_sq: Square, target: Square) -> bool:
    """Does the piece on *from_sq* threaten *target*?

    Only geometry and blockers matter here; the occupant of *target* is
    ignored, so this also answers "would a king be safe on *target*".
    """
    piece = position.board[from_sq]
    if piece is None:
        return False

    ptype = piece.piece_type
    if ptype == PieceType.PAWN:
        return target in PAWN_ATTACKS[int(piece.color)][from_sq]
    if ptype == PieceType.KNIGHT:
        return target in KNIGHT_TARGETS[from_sq]
    if ptype == PieceType.KING:
        return target in KING_TARGETS[from_sq]

    board = position.board
    for ray in SLIDER_RAYS[ptype][from_sq]:
        for to_sq in ray:
            if to_sq == target:
                return True
            if board[to_sq] is not None:
                break
    return False


def is_square_attacked(position: Position, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    for from_sq in position.board.all_pieces(by_color):
        if attacks_square(position, from_sq, sq):
            return True
    return False


def king_square(position: Position, color: Color) -> Square | None:
    return position.board.king_square(color)


def is_in_check(position: Position, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?

    A side without a king is never in check.
    """
    king_sq = position.board.king_square(color)
    if king_sq is None:
        return False
    return is_square_attacked(position, king_sq, color.opposite)
