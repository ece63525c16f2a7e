"""
Driver that turns a hand of tiles into a finished crossword.

The first word goes down by letter score; every later word is the move the
search rates highest, committed to the live board until the hand runs out.
"""

import logging
from datetime import datetime
from typing import List, Mapping, Optional, Tuple

from ..board import Board, format_placements
from ..dictionary import Dictionary
from .inventory import LetterInventory
from .models import BuildResult, SolverConfig
from .search import Searcher, apply_move


log = logging.getLogger("bananagrid")


class Solver:
    """
    Builds a crossword that uses every tile in hand.

    Places the highest-scoring word the hand can spell across the origin,
    then keeps committing the move the search likes best until the hand is
    empty or nothing more can be placed.

    Attributes:
        dictionary: Words the crossword may contain
        config: Board size, search depth and heuristic weights
        board: The board being built
        inventory: Tiles still in hand
        end_reason: Why the last build stopped
    """

    def __init__(self, dictionary: Dictionary, config: Optional[SolverConfig] = None):
        self.dictionary = dictionary
        self.config = config or SolverConfig()
        self.searcher = Searcher(depth=self.config.search_depth, weights=self.config.weights)
        self.board = Board(dictionary, side_length=self.config.side_length)
        self.inventory = LetterInventory()
        self.moves_committed = 0
        self.end_reason = ""
        self._started_at: Optional[datetime] = None
        self._duration = 0.0

    @property
    def success(self) -> bool:
        return not self.board.is_empty and self.inventory.is_empty

    def best_first_word(self, inventory: Mapping[str, int]) -> List[str]:
        """Words the hand can spell, best letter score first, ties alphabetical."""
        candidates = self.dictionary.words_formable(inventory)
        return sorted(candidates, key=lambda w: (-self.dictionary.word_score(w), w))

    def place_first_word(self) -> bool:
        for word in self.best_first_word(self.inventory):
            if self.board.add_first_word(word):
                self.inventory.use_word(word)
                log.info("First word: %s", word)
                return True
        return False

    def build(self, inventory: Mapping[str, int]) -> Tuple[Board, bool]:
        """
        Build a crossword from scratch.

        Args:
            inventory: Tiles to use

        Returns:
            The final board and whether every tile was used
        """
        self.board = Board(self.dictionary, side_length=self.config.side_length)
        self.inventory = LetterInventory(inventory)
        self.moves_committed = 0
        self.end_reason = ""
        self._started_at = datetime.now()

        if self.inventory.is_empty:
            self.end_reason = "No tiles to play"
        elif not self.place_first_word():
            self.end_reason = "No word can be formed from the tiles"
        else:
            self._extend()

        self._finish()
        return self.board, self.success

    def add_letters(self, more: Mapping[str, int]) -> bool:
        """
        Add tiles to the hand and keep building on the current board.

        Returns:
            Whether every tile ended up on the board
        """
        if self.board.is_empty:
            _, success = self.build(more)
            return success

        self.inventory.extend(more)
        self.end_reason = ""
        self._started_at = datetime.now()
        self._extend()
        self._finish()
        return self.success

    def _extend(self) -> None:
        while not self.inventory.is_empty:
            result = self.searcher.search(self.board, self.inventory)
            if result.move is None:
                self.end_reason = f"No legal move for the remaining tiles {self.inventory.tiles()}"
                log.warning("Stuck with %d tiles left: %s", self.inventory.total, self.inventory.tiles())
                return
            if not apply_move(self.board, self.inventory, result.move):
                self.end_reason = f"Board rejected {result.move.notation()}"
                return
            self.moves_committed += 1
            log.info("Played %s (score %d, %d tiles left)",
                     result.move.notation(), result.score, self.inventory.total)

        self.end_reason = "All tiles used"

    def _finish(self) -> None:
        if self._started_at is not None:
            self._duration = (datetime.now() - self._started_at).total_seconds()
        log.info("Build finished: %s", self.end_reason)

    def result(self, trim: bool = True) -> BuildResult:
        """Summary of the last build."""
        return BuildResult(
            success=self.success,
            end_reason=self.end_reason,
            board=self.board.render(trim=trim),
            words=sorted(self.board.words()),
            placements=format_placements(self.board).splitlines(),
            remaining=self.inventory.summary(),
            moves_committed=self.moves_committed,
            duration_seconds=self._duration,
        )


def build(
    inventory: Mapping[str, int],
    board_side_length: Optional[int] = None,
    dictionary: Optional[Dictionary] = None,
    search_depth: int = 1,
) -> Tuple[Board, bool]:
    """
    Build a crossword from a hand of tiles.

    Returns:
        The final board and whether every tile was used
    """
    settings = {"search_depth": search_depth}
    if board_side_length is not None:
        settings["side_length"] = board_side_length
    config = SolverConfig(**settings)
    solver = Solver(dictionary or Dictionary.default(), config)
    return solver.build(inventory)
