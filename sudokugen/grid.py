"""Grid storage for square Sudoku-like puzzles."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .errors import InvalidDimensionsError, InvalidNumberError, OutOfBoundsError

Cell = Optional[int]
Rows = list[list[int]]


class SudokuGrid:
    """
    A square grid of ``size = block_width * block_height`` columns and rows.

    Each cell holds a digit in ``1..=size`` or ``None`` when empty. Cells are
    addressed as ``(column, row)`` with zero-based coordinates.
    """

    def __init__(self, block_width: int, block_height: int):
        if block_width <= 0 or block_height <= 0:
            raise InvalidDimensionsError(
                f"Block dimensions must be positive, got {block_width}x{block_height}"
            )

        self._block_width = block_width
        self._block_height = block_height
        self._size = block_width * block_height
        self._cells: list[Cell] = [None] * (self._size * self._size)

    @classmethod
    def from_rows(
        cls, block_width: int, block_height: int, rows: Sequence[Sequence[Cell]]
    ) -> SudokuGrid:
        """
        Build a grid from a list of rows.

        Args:
            block_width: Horizontal dimension of one block
            block_height: Vertical dimension of one block
            rows: ``size`` rows of ``size`` values, 0 or None for empty cells

        Returns:
            The populated grid
        """
        grid = cls(block_width, block_height)
        size = grid.size

        if len(rows) != size or any(len(row) != size for row in rows):
            raise InvalidDimensionsError(
                f"Expected {size} rows of {size} cells for "
                f"{block_width}x{block_height} blocks"
            )

        for row_index, row in enumerate(rows):
            for column_index, value in enumerate(row):
                if value:
                    grid.set_cell(column_index, row_index, int(value))

        return grid

    @property
    def block_width(self) -> int:
        return self._block_width

    @property
    def block_height(self) -> int:
        return self._block_height

    @property
    def size(self) -> int:
        """Number of columns, rows and distinct digits."""
        return self._size

    def _index(self, column: int, row: int) -> int:
        if not (0 <= column < self._size and 0 <= row < self._size):
            raise OutOfBoundsError(
                f"Cell ({column}, {row}) is outside a {self._size}x{self._size} grid"
            )
        return row * self._size + column

    def get_cell(self, column: int, row: int) -> Cell:
        return self._cells[self._index(column, row)]

    def set_cell(self, column: int, row: int, number: int) -> None:
        index = self._index(column, row)
        if not 1 <= number <= self._size:
            raise InvalidNumberError(
                f"Number {number} is outside 1..{self._size}"
            )
        self._cells[index] = number

    def clear_cell(self, column: int, row: int) -> None:
        self._cells[self._index(column, row)] = None

    def has_number(self, column: int, row: int, number: int) -> bool:
        return self.get_cell(column, row) == number

    def count_clues(self) -> int:
        """Count the non-empty cells."""
        return sum(1 for cell in self._cells if cell is not None)

    def is_full(self) -> bool:
        return None not in self._cells

    def is_empty(self) -> bool:
        return all(cell is None for cell in self._cells)

    def cells(self) -> Iterable[tuple[int, int]]:
        """Iterate all coordinates in row-major order."""
        for row in range(self._size):
            for column in range(self._size):
                yield column, row

    def row(self, row: int) -> list[Cell]:
        start = self._index(0, row)
        return self._cells[start : start + self._size]

    def column(self, column: int) -> list[Cell]:
        return self._cells[self._index(column, 0) :: self._size]

    def block(self, column: int, row: int) -> list[Cell]:
        """Values of the block containing ``(column, row)``."""
        self._index(column, row)
        left = (column // self._block_width) * self._block_width
        top = (row // self._block_height) * self._block_height
        values: list[Cell] = []
        for r in range(top, top + self._block_height):
            start = r * self._size + left
            values.extend(self._cells[start : start + self._block_width])
        return values

    def to_rows(self) -> Rows:
        """Export as a list of rows with 0 for empty cells."""
        return [
            [cell or 0 for cell in self._cells[r * self._size : (r + 1) * self._size]]
            for r in range(self._size)
        ]

    def copy(self) -> SudokuGrid:
        clone = SudokuGrid.__new__(SudokuGrid)
        clone._block_width = self._block_width
        clone._block_height = self._block_height
        clone._size = self._size
        clone._cells = list(self._cells)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuGrid):
            return NotImplemented
        return (
            self._block_width == other._block_width
            and self._block_height == other._block_height
            and self._cells == other._cells
        )

    def __repr__(self) -> str:
        return (
            f"SudokuGrid({self._block_width}x{self._block_height}, "
            f"clues={self.count_clues()})"
        )
