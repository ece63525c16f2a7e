"""Exceptions raised when the board API is misused."""


class BoardError(ValueError):
    """Base exception for caller-contract violations on a board."""


class InvalidReferenceError(BoardError):
    """Raised when an anchor word/ordinal is not on the board."""


class IndexOutOfRangeError(BoardError):
    """Raised when a crossing index falls outside its word."""


class MismatchedCrossingLetterError(BoardError):
    """Raised when the two crossing indices name different letters."""


class FirstWordMisuseError(BoardError):
    """Raised when first-word and general placement calls are mixed up."""


class OutOfBoundsError(BoardError):
    """Raised when a grid coordinate lies outside the board."""
