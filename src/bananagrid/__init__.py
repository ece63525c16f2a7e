"""Build Bananagrams crosswords that use every tile in hand."""

from .dictionary import Dictionary, DictionaryLoadError
from .board import Board, Move, Orientation, PlacedWord
from .engine import LetterInventory, Solver, SolverConfig, build

__all__ = [
    "Dictionary",
    "DictionaryLoadError",
    "Board",
    "Move",
    "Orientation",
    "PlacedWord",
    "LetterInventory",
    "Solver",
    "SolverConfig",
    "build",
]
