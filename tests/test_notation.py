"""Tests for writing and replaying placement logs."""

import pytest

from bananagrid.board import (
    BoardError,
    InvalidReferenceError,
    Orientation,
    format_placements,
    parse_placements,
    replay,
)


@pytest.fixture
def bridged_board(atlas_board):
    """ATLAS, two ATs below it, and a second AT crossing the second one."""
    assert atlas_board.add_word("AT", "AT", 2, 1, 1)
    return atlas_board


class TestFormat:
    """Board to text."""

    def test_first_line_is_root(self, cats_board):
        """A lone first word is written as `WORD H`."""
        assert format_placements(cats_board) == "CATS H"

    def test_ordinals_for_repeated_words(self, bridged_board):
        """The second placement of AT is written AT#2."""
        assert format_placements(bridged_board).splitlines() == [
            "ATLAS H",
            "AT[0] @ ATLAS[0] V",
            "AT[0] @ ATLAS[3] V",
            "AT[1] @ AT#2[1] H",
        ]


class TestParse:
    """Text to entries."""

    def test_parse_entries(self):
        """Fields are read from each line, ordinal defaulting to 1."""
        entries, errors = parse_placements("atlas h\nAT[0] @ ATLAS[3] V\nAT[1]@AT#2[1] H\n")

        assert errors == []
        assert entries[0].word == "ATLAS"
        assert entries[0].target is None
        second, third = entries[1], entries[2]
        assert (second.word, second.word_idx, second.target, second.target_ordinal,
                second.target_idx, second.orientation) == ("AT", 0, "ATLAS", 1, 3, Orientation.VERTICAL)
        assert (third.target, third.target_ordinal, third.orientation) == ("AT", 2, Orientation.HORIZONTAL)

    def test_empty_log(self):
        """Nothing to parse is an error."""
        entries, errors = parse_placements("  \n\n")
        assert entries == []
        assert [e.code for e in errors] == ["EMPTY_LOG"]

    def test_root_must_be_horizontal(self):
        """The first word is always written with H."""
        _, errors = parse_placements("ATLAS V")
        assert errors[0].code == "INVALID_ROOT"
        assert errors[0].line == 1

    def test_bad_lines_reported_with_line_numbers(self):
        """Every malformed line is collected."""
        entries, errors = parse_placements("ATLAS H\nAT[0] ATLAS[0] V\nAT[0] @ ATLAS[3] V\nAT @ ATLAS V")
        assert [(e.code, e.line) for e in errors] == [("INVALID_LINE", 2), ("INVALID_LINE", 4)]
        assert len(entries) == 2


class TestReplay:
    """Rebuilding boards from logs."""

    def test_round_trip(self, bridged_board):
        """Replaying the log gives the same grid and placements."""
        log = format_placements(bridged_board)
        rebuilt = replay(log, bridged_board.dictionary, side_length=11)

        assert rebuilt.render() == bridged_board.render()
        assert rebuilt.placed_words() == bridged_board.placed_words()
        assert rebuilt.word_frequency("AT") == 3

    def test_parse_errors_raise(self, town_dictionary):
        """A log that does not parse cannot be replayed."""
        with pytest.raises(ValueError):
            replay("ATLAS V", town_dictionary)

    def test_rejected_placement_raises(self, town_dictionary):
        """A placement that breaks the board stops the replay."""
        # ATE next to the first AT leaves TE in a row
        with pytest.raises(ValueError, match="rejected"):
            replay("ATLAS H\nAT[0] @ ATLAS[0] V\nATE[1] @ ATLAS[1] V", town_dictionary, side_length=11)

    def test_unknown_anchor_raises(self, town_dictionary):
        """An ordinal past the placements of a word is an invalid reference."""
        with pytest.raises(InvalidReferenceError):
            replay("ATLAS H\nAT[0] @ ATLAS[0] V\nAT[1] @ AT#2[1] H", town_dictionary)

    def test_wrong_orientation_raises(self, town_dictionary):
        """A move parallel to its anchor is a board error."""
        with pytest.raises(BoardError):
            replay("ATLAS H\nAT[0] @ ATLAS[0] H", town_dictionary)

    def test_first_word_not_a_word(self, town_dictionary):
        """An unknown first word cannot be placed."""
        with pytest.raises(ValueError, match="could not be placed"):
            replay("XYZZY H", town_dictionary)

    def test_line_numbers_count_blank_lines(self):
        """Errors point at the line in the file, blank lines included."""
        _, errors = parse_placements("ATLAS H\n\nAT[0] ATLAS[0] V\n")
        assert [(e.code, e.line) for e in errors] == [("INVALID_LINE", 3)]

    def test_zero_ordinal_is_a_bad_line(self):
        """Ordinals start at 1, so #0 never parses."""
        entries, errors = parse_placements("ATLAS H\nAT[0] @ ATLAS#0[0] V")
        assert [e.code for e in errors] == ["INVALID_LINE"]
        assert len(entries) == 1

    def test_accented_word_is_a_bad_line(self):
        """Only A to Z words appear in a log."""
        _, errors = parse_placements("ATLAS H\nTÉ[0] @ ATLAS[1] V")
        assert [e.code for e in errors] == ["INVALID_LINE"]
