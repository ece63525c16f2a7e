"""Data models for the crossword board."""

from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Orientation(str, Enum):
    """Reading direction of a placed word."""

    HORIZONTAL = "H"
    VERTICAL = "V"

    @property
    def perpendicular(self) -> "Orientation":
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


class Position(NamedTuple):
    """A word's first cell and its orientation."""
    x: int
    y: int
    orientation: Orientation

    def cell(self, offset: int) -> Tuple[int, int]:
        """Coordinates of the character `offset` places along the word."""
        if self.orientation is Orientation.HORIZONTAL:
            return (self.x + offset, self.y)
        # Vertical words read top-to-bottom, y grows upward
        return (self.x, self.y - offset)


class PlacedWord(NamedTuple):
    """One placement of a word on the board, told apart by its ordinal."""
    text: str
    ordinal: int = 1

    def label(self) -> str:
        return self.text if self.ordinal == 1 else f"{self.text}#{self.ordinal}"


class Move(BaseModel):
    """A proposal to cross a new word into a word already on the board."""

    model_config = ConfigDict(frozen=True)

    anchor: PlacedWord
    anchor_index: int = Field(..., ge=0)
    word: str = Field(..., min_length=1, pattern=r'^[A-Z]+$')
    word_index: int = Field(..., ge=0)
    orientation: Orientation

    @property
    def shared_letter(self) -> str:
        """The letter already on the board where the two words cross."""
        return self.word[self.word_index]

    def notation(self) -> str:
        """Render as `NEW[j] @ ANCHOR[i] D`."""
        return (
            f"{self.word}[{self.word_index}] @ "
            f"{self.anchor.label()}[{self.anchor_index}] {self.orientation.value}"
        )


class RunError(BaseModel):
    """A run of letters on the grid that is not a dictionary word."""
    code: str = "INVALID_RUN"
    message: str
    run: str
    x: int
    y: int
    orientation: Orientation


class ValidationResult(BaseModel):
    """Result of checking every run on a board."""
    valid: bool
    errors: List[RunError] = Field(default_factory=list)
    runs: List[str] = Field(default_factory=list)
    grid: Optional[str] = None
    tiles_used: int = 0


class PlacementEntry(BaseModel):
    """One line of a placement log."""
    word: str = Field(..., min_length=1, pattern=r'^[A-Z]+$')
    orientation: Orientation
    target: Optional[str] = None
    target_ordinal: int = Field(1, ge=1)
    target_idx: Optional[int] = Field(None, ge=0)
    word_idx: Optional[int] = Field(None, ge=0)


class NotationError(BaseModel):
    """A placement log line that could not be parsed."""
    code: str
    message: str
    line: Optional[int] = None
