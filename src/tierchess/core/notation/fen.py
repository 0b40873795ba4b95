"""FEN parsing and serialization.

Positions live in memory only; FEN is used for fixtures, logging and export.
"""

from __future__ import annotations

from tierchess.core.board import Board
from tierchess.core.enums import CastlingRights, Color
from tierchess.core.piece import Piece
from tierchess.core.position import Position
from tierchess.core.types import Square, make_square, parse_square, rank_of, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return board


def _parse_castling(field: str) -> CastlingRights:
    castling = CastlingRights.NONE
    if field == "-":
        return castling
    rights = dict(_CASTLING_CHARS)
    for ch in field:
        right = rights.get(ch)
        if right is None or castling & right:
            raise ValueError(f"Invalid FEN castling field: {field!r}")
        castling |= right
    return castling


def _parse_counter(field: str, name: str, minimum: int) -> int:
    try:
        value = int(field)
    except ValueError:
        raise ValueError(f"Invalid FEN {name}: {field!r}") from None
    if value < minimum:
        raise ValueError(f"Invalid FEN {name}: {field!r}")
    return value


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]
    board = _parse_placement(placement, fen)

    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_ep_rank = 5 if side == Color.WHITE else 2
        if rank_of(ep) != expected_ep_rank:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    halfmove = _parse_counter(parts[4], "halfmove clock", 0) if len(parts) > 4 else 0
    fullmove = _parse_counter(parts[5], "fullmove number", 1) if len(parts) > 5 else 1

    return Position(
        board=board,
        side_to_move=side,
        castling=_parse_castling(castling_part),
        en_passant=ep,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
    )


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.board[make_square(file, rank)]
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)

    side_str = "w" if pos.side_to_move == Color.WHITE else "b"
    castling_str = "".join(ch for ch, right in _CASTLING_CHARS if pos.castling & right)
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return (
        f"{'/'.join(rows)} {side_str} {castling_str or '-'} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )
