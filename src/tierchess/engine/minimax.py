"""Fixed-depth minimax search with alpha-beta pruning."""

from __future__ import annotations

import logging
import random

from tierchess.core.move import Move
from tierchess.core.move_generator import MoveGenerator
from tierchess.core.position import Position
from tierchess.core.rules import Rules
from tierchess.core.transition import apply_move
from tierchess.engine.evaluate import Evaluator
from tierchess.engine.search import IEngine, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)
_INF_SCORE = 1_000_000


def _move_order(move: Move) -> tuple[int, int]:
    return (move.from_sq, move.to_sq)


class MinimaxEngine(IEngine):
    """Picks the computer's move: the side to move at the root is the computer.

    Every root move is searched with a full window so that its score is exact;
    all moves sharing the best score are candidates and one of them is chosen
    with the engine's random source. Seed it for reproducible games.
    """

    __slots__ = ("_limits", "_rng", "_nodes")

    def __init__(
        self,
        limits: SearchLimits | None = None,
        *,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._limits = limits or SearchLimits()
        self._rng = rng if rng is not None else random.Random(seed)
        self._nodes = 0

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    def set_limits(self, limits: SearchLimits) -> None:
        self._limits = limits

    def search(
        self,
        position: Position,
        limits: SearchLimits | None = None,
    ) -> SearchResult:
        depth = (limits or self._limits).max_depth
        self._nodes = 0
        evaluator = Evaluator(position.side_to_move)

        root_moves = sorted(
            MoveGenerator(position).all_legal_moves(position.side_to_move),
            key=_move_order,
        )
        if not root_moves:
            return SearchResult(None, evaluator.evaluate(position), 0, self._nodes)

        scores: dict[Move, int] = {}
        for move in root_moves:
            child = apply_move(position, move.from_sq, move.to_sq)
            scores[move] = self._minimax(
                child, depth - 1, -_INF_SCORE, _INF_SCORE, evaluator
            )

        best_score = max(scores.values())
        candidates = tuple(m for m in root_moves if scores[m] == best_score)
        best_move = self._rng.choice(candidates)

        _LOGGER.debug(
            "Search depth=%d nodes=%d score=%d candidates=%s chosen=%s",
            depth,
            self._nodes,
            best_score,
            " ".join(str(m) for m in candidates),
            best_move,
        )
        return SearchResult(best_move, best_score, depth, self._nodes, candidates)

    def _minimax(
        self,
        position: Position,
        depth: int,
        alpha: int,
        beta: int,
        evaluator: Evaluator,
    ) -> int:
        self._nodes += 1

        if depth <= 0:
            return evaluator.evaluate(position)

        side = position.side_to_move
        moves = sorted(MoveGenerator(position).all_legal_moves(side), key=_move_order)
        result = Rules.classify(position, has_legal_move=bool(moves))
        if result.is_over:
            return evaluator.evaluate(position, result)

        maximizing = side == evaluator.computer_color

        if maximizing:
            best_score = -_INF_SCORE
            for move in moves:
                child = apply_move(position, move.from_sq, move.to_sq)
                best_score = max(
                    best_score, self._minimax(child, depth - 1, alpha, beta, evaluator)
                )
                alpha = max(alpha, best_score)
                if beta <= alpha:
                    break
            return best_score

        best_score = _INF_SCORE
        for move in moves:
            child = apply_move(position, move.from_sq, move.to_sq)
            best_score = min(
                best_score, self._minimax(child, depth - 1, alpha, beta, evaluator)
            )
            beta = min(beta, best_score)
            if beta <= alpha:
                break
        return best_score


def best_move(
    position: Position,
    *,
    depth: int | None = None,
    seed: int | None = None,
) -> Move | None:
    """One-shot search for the side to move; ``None`` when it has no move."""
    limits = SearchLimits(max_depth=depth) if depth is not None else None
    return MinimaxEngine(limits, seed=seed).search(position).best_move
