"""Exceptions raised by sudokugen."""


class SudokuError(Exception):
    """Base class for all sudokugen errors."""


class InvalidDimensionsError(SudokuError, ValueError):
    """Block width or height is zero, or grid data does not match them."""


class UnsatisfiableConstraintError(SudokuError):
    """No full grid of the requested dimensions satisfies the constraint."""


class OutOfBoundsError(SudokuError, IndexError):
    """A cell coordinate lies outside the grid."""


class InvalidNumberError(SudokuError, ValueError):
    """A digit lies outside ``1..=size``."""
