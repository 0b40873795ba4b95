"""Chess engine package: evaluation and fixed-depth search."""

from tierchess.engine.evaluate import MATE_SCORE, PIECE_VALUES, Evaluator
from tierchess.engine.minimax import MinimaxEngine, best_move
from tierchess.engine.search import (
    DEFAULT_SEARCH_DEPTH,
    MAX_SEARCH_DEPTH,
    IEngine,
    SearchLimits,
    SearchResult,
)

__all__ = [
    "DEFAULT_SEARCH_DEPTH",
    "Evaluator",
    "IEngine",
    "MATE_SCORE",
    "MAX_SEARCH_DEPTH",
    "MinimaxEngine",
    "PIECE_VALUES",
    "SearchLimits",
    "SearchResult",
    "best_move",
]
