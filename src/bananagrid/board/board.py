"""
Crossword board for building Bananagrams grids.

Every accepted placement leaves the board valid: each maximal run of two or
more adjacent letters, read left-to-right or top-to-bottom, is a dictionary
word. Placements are tried on a scratch copy and only committed when the copy
is still valid, so a rejected placement never changes the board.
"""

import logging
from collections import Counter
from typing import Dict, List, Mapping, NamedTuple, Optional, Set, Tuple

from ..dictionary import Dictionary
from .errors import (
    BoardError,
    FirstWordMisuseError,
    IndexOutOfRangeError,
    InvalidReferenceError,
    MismatchedCrossingLetterError,
)
from .grid import DEFAULT_SIDE_LENGTH, EMPTY_GLYPH, Grid
from .models import Move, Orientation, PlacedWord, Position, RunError, ValidationResult


log = logging.getLogger("bananagrid")


class _Record(NamedTuple):
    placed: PlacedWord
    position: Position
    move: Optional[Move]  # None for the first word


class Board:
    """
    Grid plus a registry of the words placed on it.

    Placements live in an arena indexed by integer handle; `_handles` maps a
    word's text to the handles of its placements in order, so the n-th
    placement of a text has ordinal n.
    """

    def __init__(self, dictionary: Dictionary, side_length: int = DEFAULT_SIDE_LENGTH):
        self.dictionary = dictionary
        self._grid = Grid(side_length)
        self._records: List[_Record] = []
        self._handles: Dict[str, List[int]] = {}

    def copy(self) -> "Board":
        """Independent copy; the dictionary is shared since it never changes."""
        clone = Board.__new__(Board)
        clone.dictionary = self.dictionary
        clone._grid = self._grid.copy()
        clone._records = list(self._records)
        clone._handles = {text: list(handles) for text, handles in self._handles.items()}
        return clone

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def side_length(self) -> int:
        return self._grid.side_length

    @property
    def min_coord(self) -> int:
        return self._grid.min

    @property
    def max_coord(self) -> int:
        return self._grid.max

    @property
    def is_empty(self) -> bool:
        return not self._records

    @property
    def tile_count(self) -> int:
        """Number of filled cells."""
        return len(self._grid)

    def letter_at(self, x: int, y: int) -> Optional[str]:
        return self._grid.get(x, y)

    def letters(self) -> List[str]:
        """Sorted letters of every filled cell."""
        return sorted(letter for _, letter in self._grid.filled())

    def word_frequency(self, text: str) -> int:
        """How many times `text` has been placed."""
        return len(self._handles.get(text, ()))

    def words(self) -> Set[str]:
        """Distinct texts of the placed words."""
        return set(self._handles)

    def placed_words(self) -> List[PlacedWord]:
        """Every placement, in the order it was made."""
        return [record.placed for record in self._records]

    def lookup(self, text: str, ordinal: int) -> Optional[PlacedWord]:
        handle = self._handle(text, ordinal)
        return None if handle is None else self._records[handle].placed

    def position_of(self, placed: PlacedWord) -> Position:
        handle = self._handle(placed.text, placed.ordinal)
        if handle is None:
            raise InvalidReferenceError(f"'{placed.label()}' is not on the board")
        return self._records[handle].position

    def history(self) -> List[Tuple[PlacedWord, Optional[Move]]]:
        """Placements with the move that made each one (None for the first)."""
        return [(record.placed, record.move) for record in self._records]

    def _handle(self, text: str, ordinal: int) -> Optional[int]:
        handles = self._handles.get(text)
        if not handles or not 1 <= ordinal <= len(handles):
            return None
        return handles[ordinal - 1]

    # ------------------------------------------------------------------
    # Validity
    # ------------------------------------------------------------------

    def is_valid(self) -> bool:
        """True when every run of two or more letters is a dictionary word."""
        return all(self.dictionary.is_word(run) for _, _, run in self._grid.runs())

    def validate(self) -> ValidationResult:
        """Check every run and report the ones that are not words."""
        runs: List[str] = []
        errors: List[RunError] = []
        for (x, y), orientation, run in self._grid.runs():
            runs.append(run)
            if not self.dictionary.is_word(run):
                errors.append(RunError(
                    message=f"'{run}' at ({x}, {y}) {orientation.value} is not a valid dictionary word",
                    run=run,
                    x=x,
                    y=y,
                    orientation=orientation,
                ))

        return ValidationResult(
            valid=not errors,
            errors=errors,
            runs=runs,
            grid=self._grid.render(trim=True) or None,
            tiles_used=self.tile_count,
        )

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def word_fits(
        self,
        word: str,
        anchor_text: Optional[str] = None,
        anchor_ordinal: Optional[int] = None,
        anchor_index: Optional[int] = None,
        new_index: Optional[int] = None,
    ) -> bool:
        """
        Whether `word` has room on the board.

        Called with just `word`, this is the first-word check (the board must
        be empty and the word no longer than a side). Called with an anchor
        and crossing indices, every cell the word would cover must lie on the
        grid and be empty or already hold the same letter.

        Raises:
            FirstWordMisuseError: first-word check on a non-empty board
            InvalidReferenceError: the anchor is not on the board
            IndexOutOfRangeError: a crossing index is outside its word
        """
        if anchor_text is None:
            if not self.is_empty:
                raise FirstWordMisuseError(
                    "The single-word fit check is only for the first word on the board"
                )
            return len(word) <= self.side_length

        position = self._crossing_position(word, anchor_text, anchor_ordinal, anchor_index, new_index)
        return self._fits_at(word, position)

    def _fits_at(self, word: str, position: Position) -> bool:
        for offset, letter in enumerate(word):
            x, y = position.cell(offset)
            if not self._grid.in_bounds(x, y):
                return False
            existing = self._grid.get(x, y)
            if existing is not None and existing != letter:
                return False
        return True

    def _crossing_position(
        self,
        word: str,
        anchor_text: str,
        anchor_ordinal: Optional[int],
        anchor_index: Optional[int],
        new_index: Optional[int],
    ) -> Position:
        """Where `word` starts so that its crossing letter lands on the anchor's."""
        if self.is_empty:
            raise FirstWordMisuseError("Place a first word before crossing words into it")
        if anchor_ordinal is None or anchor_index is None or new_index is None:
            raise BoardError("Crossing placement needs anchor ordinal and both crossing indices")

        handle = self._handle(anchor_text, anchor_ordinal)
        if handle is None:
            raise InvalidReferenceError(
                f"Anchor word '{anchor_text}' #{anchor_ordinal} is not on the board"
            )
        if not 0 <= anchor_index < len(anchor_text):
            raise IndexOutOfRangeError(
                f"Anchor index {anchor_index} out of bounds for '{anchor_text}' (length {len(anchor_text)})"
            )
        if not 0 <= new_index < len(word):
            raise IndexOutOfRangeError(
                f"Word index {new_index} out of bounds for '{word}' (length {len(word)})"
            )
        if anchor_text[anchor_index] != word[new_index]:
            raise MismatchedCrossingLetterError(
                f"Letter mismatch: {word}[{new_index}]='{word[new_index]}' vs "
                f"{anchor_text}[{anchor_index}]='{anchor_text[anchor_index]}'"
            )

        anchor = self._records[handle].position
        cross_x, cross_y = anchor.cell(anchor_index)
        orientation = anchor.orientation.perpendicular
        if orientation is Orientation.HORIZONTAL:
            return Position(cross_x - new_index, cross_y, orientation)
        return Position(cross_x, cross_y + new_index, orientation)

    def _write(self, grid: Grid, word: str, position: Position) -> None:
        for offset, letter in enumerate(word):
            grid.set(*position.cell(offset), letter)

    def _commit(self, word: str, position: Position, move: Optional[Move]) -> PlacedWord:
        self._write(self._grid, word, position)
        handles = self._handles.setdefault(word, [])
        placed = PlacedWord(word, len(handles) + 1)
        handles.append(len(self._records))
        self._records.append(_Record(placed, position, move))
        return placed

    def _valid_with(self, word: str, position: Position) -> bool:
        scratch = self.copy()
        self._write(scratch._grid, word, position)
        return scratch.is_valid()

    def add_first_word(self, word: str) -> bool:
        """
        Place the first word horizontally, straddling the origin.

        Returns:
            True if the word was placed

        Raises:
            FirstWordMisuseError: if the board already holds a word
        """
        if not self.is_empty:
            raise FirstWordMisuseError("Only the first word can be placed without an anchor")
        if not self.word_fits(word):
            return False

        position = Position(-(len(word) // 2), 0, Orientation.HORIZONTAL)
        if not self._fits_at(word, position) or not self._valid_with(word, position):
            return False
        self._commit(word, position, None)
        return True

    def add_word(
        self,
        word: str,
        anchor_text: str,
        anchor_ordinal: int,
        anchor_index: int,
        new_index: int,
    ) -> bool:
        """
        Cross `word` into an existing placement, perpendicular to it.

        `word[new_index]` lands on `anchor_text[anchor_index]`. The board is
        only changed when the word fits and the result is valid.

        Returns:
            True if the word was placed
        """
        position = self._crossing_position(word, anchor_text, anchor_ordinal, anchor_index, new_index)
        if not self._fits_at(word, position) or not self._valid_with(word, position):
            return False
        move = Move(
            anchor=PlacedWord(anchor_text, anchor_ordinal),
            anchor_index=anchor_index,
            word=word,
            word_index=new_index,
            orientation=position.orientation,
        )
        self._commit(word, position, move)
        return True

    def add_move(self, move: Move) -> bool:
        """Apply a Move; see `add_word`."""
        anchor = self.position_of(move.anchor)
        if move.orientation is anchor.orientation:
            raise BoardError(
                f"'{move.word}' must be perpendicular to '{move.anchor.label()}' "
                f"(both are {move.orientation.value})"
            )
        return self.add_word(
            move.word,
            move.anchor.text,
            move.anchor.ordinal,
            move.anchor_index,
            move.word_index,
        )

    def is_legal(self, move: Move) -> bool:
        """Whether `move` would be accepted, tried on a copy."""
        return self.copy().add_move(move)

    def tiles_required(self, move: Move) -> int:
        """Number of empty cells the move's word would cover."""
        position = self._crossing_position(
            move.word, move.anchor.text, move.anchor.ordinal, move.anchor_index, move.word_index
        )
        return sum(
            1 for offset in range(len(move.word))
            if self._grid.is_empty(*position.cell(offset))
        )

    # ------------------------------------------------------------------
    # Move generation
    # ------------------------------------------------------------------

    def legal_moves(self, inventory: Mapping[str, int]) -> List[Move]:
        """
        Every legal move that crosses a new word into a placed word.

        Only one side of each placed word is probed: the cell to the right of
        a vertical word's letter and the cell below a horizontal word's
        letter. When that cell is empty the letter is lent to the hand and
        every word formable from the hand that uses it is tried at each
        index where the letter occurs. A move is kept only if it is legal and
        lays exactly one tile per letter other than the crossing one.
        """
        moves: List[Move] = []
        for record in self._records:
            placed, position = record.placed, record.position
            orientation = position.orientation.perpendicular
            dx, dy = (1, 0) if position.orientation is Orientation.VERTICAL else (0, -1)
            formable: Dict[str, List[str]] = {}

            for anchor_index, letter in enumerate(placed.text):
                x, y = position.cell(anchor_index)
                nx, ny = x + dx, y + dy
                if not self._grid.in_bounds(nx, ny):
                    break
                if self._grid.is_filled(nx, ny):
                    continue

                if letter not in formable:
                    hand = Counter(inventory)
                    hand[letter] += 1
                    candidates = self.dictionary.words_formable(hand, required_letters={letter})
                    formable[letter] = sorted(w for w in candidates if len(w) > 1)

                for word in formable[letter]:
                    for word_index, candidate in enumerate(word):
                        if candidate != letter:
                            continue
                        move = Move(
                            anchor=placed,
                            anchor_index=anchor_index,
                            word=word,
                            word_index=word_index,
                            orientation=orientation,
                        )
                        if self.tiles_required(move) != len(word) - 1:
                            continue
                        if self.is_legal(move):
                            moves.append(move)

        log.debug("Found %d legal moves for %d placed words", len(moves), len(self._records))
        return moves

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, placeholder: str = EMPTY_GLYPH, trim: bool = False) -> str:
        return self._grid.render(placeholder=placeholder, trim=trim)

    def __str__(self) -> str:
        return self.render()
