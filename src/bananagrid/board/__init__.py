"""Crossword board: grid, placements, validity and move generation."""

from .models import (
    Orientation,
    Position,
    PlacedWord,
    Move,
    RunError,
    ValidationResult,
    PlacementEntry,
    NotationError,
)
from .errors import (
    BoardError,
    InvalidReferenceError,
    IndexOutOfRangeError,
    MismatchedCrossingLetterError,
    FirstWordMisuseError,
    OutOfBoundsError,
)
from .grid import Grid, DEFAULT_SIDE_LENGTH, EMPTY_GLYPH
from .board import Board
from .notation import format_placements, parse_placements, replay

__all__ = [
    # Models
    "Orientation",
    "Position",
    "PlacedWord",
    "Move",
    "RunError",
    "ValidationResult",
    "PlacementEntry",
    "NotationError",
    # Errors
    "BoardError",
    "InvalidReferenceError",
    "IndexOutOfRangeError",
    "MismatchedCrossingLetterError",
    "FirstWordMisuseError",
    "OutOfBoundsError",
    # Grid and board
    "Grid",
    "DEFAULT_SIDE_LENGTH",
    "EMPTY_GLYPH",
    "Board",
    # Placement log
    "format_placements",
    "parse_placements",
    "replay",
]
