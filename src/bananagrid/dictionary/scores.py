"""Static letter values used to score words, and the tile alphabet."""

import re
from typing import Dict


# Rarer letters are worth more
LETTER_SCORES: Dict[str, int] = {
    "E": 150, "T": 100, "A": 140, "O": 140, "I": 135, "N": 120, "S": 120,
    "H": 400, "R": 130, "D": 200, "L": 110, "C": 300, "U": 120, "M": 300,
    "W": 400, "F": 400, "G": 200, "Y": 400, "P": 300, "B": 300, "V": 400,
    "K": 500, "J": 800, "X": 800, "Q": 1000, "Z": 1000,
}

VOWELS = frozenset("AEIOU")

# Tiles only come in the 26 letters of the scoring table
LETTERS_PATTERN = re.compile(r'[A-Za-z]+')


def is_vowel(letter: str) -> bool:
    return letter.strip().upper() in VOWELS


def is_letters(text: str) -> bool:
    """True when `text` is one or more of the letters A to Z, either case."""
    return LETTERS_PATTERN.fullmatch(text) is not None
