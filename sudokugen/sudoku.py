"""A puzzle instance: a grid paired with the constraint it must satisfy."""

from __future__ import annotations

from .constraint import Constraint
from .errors import InvalidNumberError, OutOfBoundsError
from .grid import SudokuGrid


class Sudoku:
    """A grid together with the rule set its digits must obey."""

    def __init__(self, grid: SudokuGrid, constraint: Constraint):
        self.grid = grid
        self.constraint = constraint

    @classmethod
    def new_empty(
        cls, block_width: int, block_height: int, constraint: Constraint
    ) -> Sudoku:
        """Create a puzzle with no digits. Zero dimensions raise InvalidDimensionsError."""
        return cls(SudokuGrid(block_width, block_height), constraint)

    def is_valid(self) -> bool:
        """Whether every filled cell satisfies the constraint."""
        return self.constraint.check(self.grid)

    def is_valid_cell(self, column: int, row: int) -> bool:
        self._check_coords(column, row)
        return self.constraint.check_cell(self.grid, column, row)

    def is_valid_number(self, column: int, row: int, number: int) -> bool:
        """
        Check if ``number`` may be placed at ``(column, row)``.

        Args:
            column: Column index
            row: Row index
            number: Digit to test (1..size)

        Returns:
            True if the constraint accepts the digit given all other cells
        """
        self._check_coords(column, row)
        if not 1 <= number <= self.grid.size:
            raise InvalidNumberError(f"Number {number} is outside 1..{self.grid.size}")
        return self.constraint.check_number(self.grid, column, row, number)

    def _check_coords(self, column: int, row: int) -> None:
        size = self.grid.size
        if not (0 <= column < size and 0 <= row < size):
            raise OutOfBoundsError(
                f"Cell ({column}, {row}) is outside a {size}x{size} grid"
            )

    def copy(self) -> Sudoku:
        """Copy the grid; the constraint is shared."""
        return Sudoku(self.grid.copy(), self.constraint)

    def __repr__(self) -> str:
        return f"Sudoku({self.grid!r}, {type(self.constraint).__name__})"
