"""
Tests for building whole crosswords.

Covers:
- First word choice by letter score
- Building until the hand is empty
- Failure reasons when no word or no move is available
- Adding tiles to an existing board
- The build summary and the module-level build()
"""

from bananagrid.board import Orientation, PlacedWord, Position, replay
from bananagrid.engine import LetterInventory, Solver, SolverConfig, build


def small_solver(dictionary, depth=1):
    return Solver(dictionary, SolverConfig(side_length=11, search_depth=depth))


class TestFirstWord:
    """Choosing the word that starts the board."""

    def test_best_first_word_order(self, small_dictionary):
        """Highest letter score first."""
        solver = small_solver(small_dictionary)
        ranked = solver.best_first_word({"C": 1, "A": 2, "T": 1, "S": 1})
        assert ranked[0] == "CATS"
        assert ranked[1] == "CAT"
        assert set(ranked) == {"CATS", "CAT", "AT", "AS", "TA"}

    def test_ties_broken_alphabetically(self, small_dictionary):
        """AT and TA share a score; AT comes first."""
        solver = small_solver(small_dictionary)
        assert solver.best_first_word({"A": 1, "T": 1}) == ["AT", "TA"]


class TestBuild:
    """Full builds."""

    def test_uses_every_tile(self, small_dictionary):
        """CATS then AT hanging from the T uses all five tiles."""
        solver = small_solver(small_dictionary)
        board, success = solver.build({"C": 1, "A": 2, "T": 1, "S": 1})

        assert success
        assert board.is_valid()
        assert board.tile_count == 5
        assert board.position_of(PlacedWord("CATS", 1)) == Position(-2, 0, Orientation.HORIZONTAL)
        assert board.words() == {"CATS", "AT"}
        assert solver.inventory.is_empty
        assert solver.moves_committed == 1
        assert solver.end_reason == "All tiles used"

    def test_letters_on_board_match_hand(self, town_dictionary):
        """Whatever is placed came from the hand."""
        hand = LetterInventory.from_tiles("C A T S A R E")
        solver = Solver(town_dictionary, SolverConfig(side_length=15))
        board, success = solver.build(hand)

        placed = LetterInventory.from_tiles(board.letters())
        placed.extend(solver.inventory)
        assert placed == hand
        assert board.is_valid()
        assert success == solver.inventory.is_empty

    def test_no_tiles(self, small_dictionary):
        """An empty hand builds nothing."""
        solver = small_solver(small_dictionary)
        board, success = solver.build({})
        assert not success
        assert board.is_empty
        assert solver.end_reason == "No tiles to play"

    def test_no_formable_word(self, small_dictionary):
        """Tiles that spell nothing leave the board empty."""
        solver = small_solver(small_dictionary)
        board, success = solver.build({"Q": 1, "Z": 1})
        assert not success
        assert board.is_empty
        assert solver.end_reason == "No word can be formed from the tiles"

    def test_stuck_with_leftover(self, small_dictionary):
        """A Q that fits nowhere ends the build."""
        solver = small_solver(small_dictionary)
        board, success = solver.build(LetterInventory.from_tiles("C A T S Q"))
        assert not success
        assert board.words() == {"CATS"}
        assert solver.inventory.summary() == {"Q": 1}
        assert solver.end_reason.startswith("No legal move")

    def test_deeper_search_also_succeeds(self, small_dictionary):
        """Depth 2 finds the same complete board."""
        solver = small_solver(small_dictionary, depth=2)
        _, success = solver.build({"C": 1, "A": 2, "T": 1, "S": 1})
        assert success


class TestAddLetters:
    """Continuing a board with more tiles."""

    def test_add_to_finished_board(self, small_dictionary):
        """Another A hangs off the existing crossword."""
        solver = small_solver(small_dictionary)
        _, success = solver.build({"C": 1, "A": 1, "T": 1, "S": 1})
        assert success
        assert solver.board.words() == {"CATS"}

        assert solver.add_letters({"A": 1})
        assert solver.board.tile_count == 5
        assert solver.board.words() == {"CATS", "AT"}

    def test_add_to_empty_board_builds(self, small_dictionary):
        """With nothing placed yet, adding tiles starts a build."""
        solver = small_solver(small_dictionary)
        assert solver.add_letters({"C": 1, "A": 1, "T": 1})
        assert solver.board.words() == {"CAT"}

    def test_add_unplayable_tile(self, small_dictionary):
        """A tile that fits nowhere stays in hand."""
        solver = small_solver(small_dictionary)
        solver.build({"C": 1, "A": 1, "T": 1, "S": 1})
        assert solver.add_letters({"Q": 1}) is False
        assert solver.inventory.summary() == {"Q": 1}


class TestResult:
    """Build summaries."""

    def test_result_fields(self, small_dictionary):
        """The summary lists words, placements and leftovers."""
        solver = small_solver(small_dictionary)
        solver.build({"C": 1, "A": 2, "T": 1, "S": 1})
        result = solver.result()

        assert result.success
        assert result.words == ["AT", "CATS"]
        assert result.placements == ["CATS H", "AT[1] @ CATS[2] V"]
        assert result.remaining == {}
        assert result.moves_committed == 1
        assert result.duration_seconds >= 0
        assert "C A T S" in result.board

    def test_placements_replay_to_same_board(self, small_dictionary):
        """The placement log rebuilds the board."""
        solver = small_solver(small_dictionary)
        board, _ = solver.build({"C": 1, "A": 2, "T": 1, "S": 1})
        log = "\n".join(solver.result().placements)

        rebuilt = replay(log, small_dictionary, side_length=11)
        assert rebuilt.render() == board.render()


class TestModuleBuild:
    """The build() shortcut."""

    def test_build_with_dictionary(self, small_dictionary):
        """Side length and dictionary are passed through."""
        board, success = build({"C": 1, "A": 2, "T": 1, "S": 1},
                               board_side_length=11, dictionary=small_dictionary)
        assert success
        assert board.side_length == 11
        assert board.tile_count == 5

    def test_build_with_default_word_list(self):
        """Without a dictionary the bundled list is used."""
        board, success = build({"C": 1, "A": 1, "T": 1})
        assert success
        assert board.side_length == 33
        assert board.tile_count == 3
