"""Search engine that builds crosswords from a hand of tiles."""

from .inventory import LetterInventory, InsufficientTilesError
from .models import HeuristicWeights, SolverConfig, SearchResult, BuildResult, load_config
from .heuristic import WIN_SCORE, evaluate
from .search import Searcher, apply_move, unique_moves
from .solver import Solver, build

__all__ = [
    "LetterInventory",
    "InsufficientTilesError",
    "HeuristicWeights",
    "SolverConfig",
    "SearchResult",
    "BuildResult",
    "load_config",
    "WIN_SCORE",
    "evaluate",
    "Searcher",
    "apply_move",
    "unique_moves",
    "Solver",
    "build",
]
