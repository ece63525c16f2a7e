"""
Depth-limited best-first search for the next move.

Every level maximizes the same heuristic, so the alpha/beta pair acts as a
monotone branch-and-bound rather than two-player alpha-beta: bounds are
handed to children unchanged and a cutoff only happens once the running best
reaches beta. In practice that means a found win ends the search early.
"""

import logging
from typing import List, Optional, Tuple

from ..board import Board, Move
from .heuristic import WIN_SCORE, evaluate
from .inventory import LetterInventory
from .models import HeuristicWeights, SearchResult


log = logging.getLogger("bananagrid")

INFINITY = 2 ** 31 - 1


def apply_move(board: Board, inventory: LetterInventory, move: Move) -> bool:
    """
    Commit `move` to the board and take its tiles from the hand.

    The crossing letter is already on the board, so a word of length L costs
    L - 1 tiles. Nothing changes when the board rejects the move.
    """
    if not board.add_move(move):
        return False
    inventory.use_word(move.word, shared_letter=move.shared_letter)
    return True


def unique_moves(moves: List[Move]) -> List[Move]:
    """Drop moves with the same content, keeping first-seen order."""
    return list(dict.fromkeys(moves))


class Searcher:
    """Chooses the next move by looking `depth` moves ahead."""

    def __init__(self, depth: int = 1, weights: Optional[HeuristicWeights] = None):
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        self.depth = depth
        self.weights = weights

    def search(self, board: Board, inventory: LetterInventory) -> SearchResult:
        """Best move from this position; `move` is None when there is none."""
        moves = unique_moves(board.legal_moves(inventory))
        score, move = self._find_move(
            board.copy(), inventory.copy(), self.depth, -INFINITY, INFINITY, moves
        )
        log.debug("Searched %d moves at depth %d, best score %d", len(moves), self.depth, score)
        return SearchResult(move=move, score=score, moves_considered=len(moves))

    def score(self, board: Board, inventory: LetterInventory, depth: Optional[int] = None) -> int:
        """Value of a position searched `depth` moves deep."""
        depth = self.depth if depth is None else depth
        score, _ = self._find_move(board.copy(), inventory.copy(), depth, -INFINITY, INFINITY)
        return score

    def _find_move(
        self,
        board: Board,
        inventory: LetterInventory,
        depth: int,
        alpha: int,
        beta: int,
        moves: Optional[List[Move]] = None,
    ) -> Tuple[int, Optional[Move]]:
        if inventory.is_empty:
            return WIN_SCORE, None
        if depth <= 0:
            return evaluate(board, inventory, weights=self.weights), None

        if moves is None:
            moves = unique_moves(board.legal_moves(inventory))
        if not moves:
            return evaluate(board, inventory, no_moves=True, weights=self.weights), None

        best_score = -INFINITY
        best_move: Optional[Move] = None

        for move in moves:
            child_board = board.copy()
            child_inventory = inventory.copy()
            if not apply_move(child_board, child_inventory, move):
                continue

            score, _ = self._find_move(child_board, child_inventory, depth - 1, alpha, beta)
            if score == WIN_SCORE:
                return score, move
            if best_move is None or score > best_score:
                best_score = score
                best_move = move

            alpha = max(alpha, best_score)
            if alpha >= beta:
                break

        if best_move is None:
            return -WIN_SCORE, None
        return best_score, best_move
