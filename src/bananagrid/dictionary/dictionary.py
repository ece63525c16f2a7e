"""Immutable word list with membership and anagram queries."""

import logging
from collections import Counter
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Set, Union

from .scores import LETTER_SCORES, is_letters


log = logging.getLogger("bananagrid")

DEFAULT_WORDS_FILE = Path(__file__).parent / "data" / "words.txt"


class DictionaryLoadError(Exception):
    """Raised when a word list cannot be read or holds no words."""


class Dictionary:
    """
    A fixed set of uppercase words plus per-letter score values.

    Built once and passed to the board and the engine; nothing mutates it
    afterwards.
    """

    def __init__(
        self,
        words: Iterable[str],
        letter_scores: Optional[Mapping[str, int]] = None,
    ):
        stripped = (w.strip() for w in words)
        self._words: FrozenSet[str] = frozenset(w.upper() for w in stripped if is_letters(w))
        self._letter_counts: Dict[str, Counter] = {w: Counter(w) for w in self._words}
        scores = LETTER_SCORES if letter_scores is None else letter_scores
        self._letter_scores: Dict[str, int] = {k.upper(): v for k, v in scores.items()}

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        letter_scores: Optional[Mapping[str, int]] = None,
    ) -> "Dictionary":
        """
        Load a word list with one word per line.

        Raises:
            DictionaryLoadError: if the file is missing or has no words
        """
        path = Path(path)
        if not path.exists():
            raise DictionaryLoadError(f"Word list not found: {path}")

        with open(path, encoding="utf-8") as f:
            dictionary = cls(f, letter_scores=letter_scores)

        if not dictionary:
            raise DictionaryLoadError(f"No words found in {path}")
        log.info("Loaded %s words from %s", f"{len(dictionary):,}", path)
        return dictionary

    @classmethod
    def default(cls) -> "Dictionary":
        """The bundled word list."""
        return cls.from_file(DEFAULT_WORDS_FILE)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word in self._words

    def __iter__(self):
        return iter(self._words)

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def is_word(self, s: str) -> bool:
        return s in self._words

    def words_formable(
        self,
        inventory: Mapping[str, int],
        candidates: Optional[Iterable[str]] = None,
        required_letters: Iterable[str] = (),
    ) -> Set[str]:
        """
        Every candidate word spelled from the inventory.

        A word qualifies when it contains each required letter at least once
        and needs no letter more times than the inventory holds it.

        Args:
            inventory: Letter counts available
            candidates: Words to consider (default: the whole dictionary)
            required_letters: Letters every returned word must contain

        Returns:
            Set of qualifying words
        """
        required = set(required_letters)
        pool = self._words if candidates is None else candidates
        result: Set[str] = set()

        for word in pool:
            if not required.issubset(word):
                continue
            counts = self._letter_counts.get(word) or Counter(word)
            if all(inventory.get(letter, 0) >= n for letter, n in counts.items()):
                result.add(word)

        return result

    def letter_score(self, letter: str) -> int:
        return self._letter_scores.get(letter.upper(), 0)

    def word_score(self, word: str) -> int:
        """Sum of the letter scores of `word`."""
        return sum(self.letter_score(letter) for letter in word)
