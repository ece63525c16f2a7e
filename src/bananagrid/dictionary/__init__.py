"""Word list and letter values for bananagrid."""

from .dictionary import Dictionary, DictionaryLoadError, DEFAULT_WORDS_FILE
from .scores import LETTER_SCORES, VOWELS, is_letters, is_vowel

__all__ = [
    "Dictionary",
    "DictionaryLoadError",
    "DEFAULT_WORDS_FILE",
    "LETTER_SCORES",
    "VOWELS",
    "is_letters",
    "is_vowel",
]
