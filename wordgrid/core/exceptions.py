"""Custom exception hierarchy for word placement."""


class WordGridError(Exception):
    """Base exception for placement failures."""


class InvalidInputError(WordGridError):
    """Raised when words or grid dimensions are rejected before searching."""


class InvalidDimensionsError(InvalidInputError):
    """Raised when a board width or height is not a positive integer."""


class EmptyWordError(InvalidInputError):
    """Raised when a word to place has no characters."""


class OutOfBoundsError(WordGridError):
    """Raised when a board cell outside the grid is read or written."""


class NoSolutionFoundError(WordGridError):
    """Raised when every candidate placement was exhausted without success."""


class ValidationError(WordGridError):
    """Raised when a solution breaks the bounds or consistency checks."""
