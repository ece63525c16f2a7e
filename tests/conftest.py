"""Shared fixtures: small dictionaries and boards."""

import pytest

from bananagrid.board import Board
from bananagrid.dictionary import Dictionary


SMALL_WORDS = ["CAT", "CATS", "AT", "AS", "TA"]

TOWN_WORDS = [
    "ATLAS", "AT", "LA", "TA", "AS", "CAT", "CATS", "TAR", "ART", "RAT",
    "ARC", "CAR", "SAT", "TEA", "EAT", "ATE", "SEA", "SET", "TEN", "NET",
    "NEST", "TENS", "ACE", "ACES", "RACE", "CARE", "SCAR", "STAR", "ARTS",
]


@pytest.fixture
def small_dictionary():
    return Dictionary(SMALL_WORDS)


@pytest.fixture
def town_dictionary():
    return Dictionary(TOWN_WORDS)


@pytest.fixture
def cats_board(small_dictionary):
    """CATS across the origin of an 11x11 board."""
    board = Board(small_dictionary, side_length=11)
    assert board.add_first_word("CATS")
    return board


@pytest.fixture
def atlas_board(town_dictionary):
    """ATLAS with AT hanging from its first and fourth letters."""
    board = Board(town_dictionary, side_length=11)
    assert board.add_first_word("ATLAS")
    assert board.add_word("AT", "ATLAS", 1, 0, 0)
    assert board.add_word("AT", "ATLAS", 1, 3, 0)
    return board
