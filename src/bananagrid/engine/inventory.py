"""Letter tiles held in hand."""

import re
from collections import Counter
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Optional, Union

from ..dictionary import is_letters


class InsufficientTilesError(ValueError):
    """Raised when a word needs tiles the inventory does not hold."""


def _tile(letter: str) -> str:
    if len(letter) != 1 or not is_letters(letter):
        raise ValueError(f"Invalid tile '{letter}': tiles are single letters A to Z")
    return letter.upper()


class LetterInventory(Mapping):
    """
    Multiset of uppercase letter tiles.

    Reads like a mapping from letter to count; missing letters count as 0
    and no count ever drops below 0.
    """

    def __init__(self, counts: Optional[Mapping[str, int]] = None):
        self._counts: Counter = Counter()
        for letter, count in (counts or {}).items():
            if count < 0:
                raise ValueError(f"Negative count {count} for '{letter}'")
            if count:
                self._counts[_tile(letter)] += count

    @classmethod
    def from_tiles(cls, tiles: Union[str, Iterable[str]]) -> "LetterInventory":
        """
        Build an inventory from free-form tile tokens.

        Tokens may be separated by whitespace or commas and are
        case-insensitive; each alphabetic character is one tile.

        Raises:
            ValueError: if a token holds anything other than letters
        """
        if isinstance(tiles, str):
            tiles = [tiles]
        tokens = [token for chunk in tiles for token in re.split(r'[\s,]+', chunk)]

        counts: Counter = Counter()
        for token in tokens:
            token = token.strip()
            if not token:
                continue
            if not is_letters(token):
                raise ValueError(f"Invalid tile '{token}': tiles must be letters A to Z")
            counts.update(token.upper())
        return cls(counts)

    def copy(self) -> "LetterInventory":
        clone = LetterInventory.__new__(LetterInventory)
        clone._counts = self._counts.copy()
        return clone

    def __getitem__(self, letter: str) -> int:
        return self._counts.get(letter, 0)

    def __iter__(self) -> Iterator[str]:
        return (letter for letter, count in self._counts.items() if count)

    def __len__(self) -> int:
        return sum(1 for count in self._counts.values() if count)

    def __contains__(self, letter: object) -> bool:
        return self._counts.get(letter, 0) > 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return dict(self.items()) == {k: v for k, v in other.items() if v}
        return NotImplemented

    def __repr__(self) -> str:
        return f"LetterInventory({self.summary()})"

    @property
    def total(self) -> int:
        """Number of tiles left."""
        return sum(self._counts.values())

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def add(self, letter: str, count: int = 1) -> None:
        if count < 0:
            raise ValueError(f"Cannot add a negative count ({count}) of '{letter}'")
        self._counts[_tile(letter)] += count

    def extend(self, other: Mapping[str, int]) -> None:
        """Add every tile from another inventory."""
        for letter, count in other.items():
            self.add(letter, count)

    def use_word(self, word: str, shared_letter: Optional[str] = None) -> None:
        """
        Take the tiles for `word` out of the hand.

        `shared_letter` is already on the board where the word crosses, so
        one of it is not taken.

        Raises:
            InsufficientTilesError: if the hand lacks any needed tile
        """
        needed = Counter(word.upper())
        if shared_letter is not None:
            needed[shared_letter.upper()] -= 1

        missing = {
            letter: count - self._counts.get(letter, 0)
            for letter, count in needed.items()
            if count > self._counts.get(letter, 0)
        }
        if missing:
            raise InsufficientTilesError(
                f"Cannot play '{word}': missing {dict(sorted(missing.items()))}"
            )

        for letter, count in needed.items():
            if count > 0:
                self._counts[letter] -= count

    def summary(self) -> Dict[str, int]:
        """Non-zero counts sorted by letter."""
        return dict(sorted(self.items()))

    def tiles(self) -> str:
        """Every tile as one sorted string."""
        return "".join(letter * count for letter, count in sorted(self.items()))
