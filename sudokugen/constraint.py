"""Placement rules for Sudoku grids."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .grid import Cell, SudokuGrid

Coord = tuple[int, int]


class Constraint(ABC):
    """
    A rule deciding whether a digit may stand in a cell.

    Implementations must be deterministic and must not modify the grid.
    """

    @abstractmethod
    def check_number(
        self, grid: SudokuGrid, column: int, row: int, number: int
    ) -> bool:
        """
        Check if placing ``number`` at ``(column, row)`` keeps the grid valid.

        The current content of the target cell is ignored, so the same call
        validates a cell that already holds ``number``.
        """

    def check_cell(self, grid: SudokuGrid, column: int, row: int) -> bool:
        number = grid.get_cell(column, row)
        if number is None:
            return True
        return self.check_number(grid, column, row, number)

    def check(self, grid: SudokuGrid) -> bool:
        """Check every filled cell of the grid."""
        return all(self.check_cell(grid, column, row) for column, row in grid.cells())

    def candidates(self, grid: SudokuGrid, column: int, row: int) -> list[int]:
        """Digits accepted at ``(column, row)``, ascending."""
        return [
            number
            for number in range(1, grid.size + 1)
            if self.check_number(grid, column, row, number)
        ]

    def groups(self, grid: SudokuGrid) -> list[list[Coord]]:
        """Coordinate groups whose digits must be pairwise distinct."""
        return []

    def peers(self, grid: SudokuGrid, column: int, row: int) -> list[Coord]:
        """
        Cells whose candidates may change when ``(column, row)`` changes.

        Depends on the position only, never on the grid's contents. The
        default is every other cell.
        """
        return [coord for coord in grid.cells() if coord != (column, row)]


def _merge(*coord_lists: list[Coord]) -> list[Coord]:
    return list(dict.fromkeys(coord for coords in coord_lists for coord in coords))


class GroupConstraint(Constraint):
    """All-different rule over groups of cells (rows, columns, blocks...)."""

    @abstractmethod
    def peer_values(self, grid: SudokuGrid, column: int, row: int) -> list[Cell]:
        """Values of every cell sharing a group with ``(column, row)``, excluding it."""

    def check_number(
        self, grid: SudokuGrid, column: int, row: int, number: int
    ) -> bool:
        return number not in self.peer_values(grid, column, row)

    def candidates(self, grid: SudokuGrid, column: int, row: int) -> list[int]:
        used = set(self.peer_values(grid, column, row))
        return [number for number in range(1, grid.size + 1) if number not in used]


class RowConstraint(GroupConstraint):
    """Each row contains every digit at most once."""

    def peer_values(self, grid: SudokuGrid, column: int, row: int) -> list[Cell]:
        values = grid.row(row)
        del values[column]
        return values

    def groups(self, grid: SudokuGrid) -> list[list[Coord]]:
        return [[(c, r) for c in range(grid.size)] for r in range(grid.size)]

    def peers(self, grid: SudokuGrid, column: int, row: int) -> list[Coord]:
        return [(c, row) for c in range(grid.size) if c != column]


class ColumnConstraint(GroupConstraint):
    """Each column contains every digit at most once."""

    def peer_values(self, grid: SudokuGrid, column: int, row: int) -> list[Cell]:
        values = grid.column(column)
        del values[row]
        return values

    def groups(self, grid: SudokuGrid) -> list[list[Coord]]:
        return [[(c, r) for r in range(grid.size)] for c in range(grid.size)]

    def peers(self, grid: SudokuGrid, column: int, row: int) -> list[Coord]:
        return [(column, r) for r in range(grid.size) if r != row]


class BlockConstraint(GroupConstraint):
    """Each block contains every digit at most once."""

    def peer_values(self, grid: SudokuGrid, column: int, row: int) -> list[Cell]:
        values = grid.block(column, row)
        offset = (row % grid.block_height) * grid.block_width + (
            column % grid.block_width
        )
        del values[offset]
        return values

    def groups(self, grid: SudokuGrid) -> list[list[Coord]]:
        width, height = grid.block_width, grid.block_height
        return [
            [
                (left + dc, top + dr)
                for dr in range(height)
                for dc in range(width)
            ]
            for top in range(0, grid.size, height)
            for left in range(0, grid.size, width)
        ]

    def peers(self, grid: SudokuGrid, column: int, row: int) -> list[Coord]:
        width, height = grid.block_width, grid.block_height
        left, top = column - column % width, row - row % height
        return [
            (left + dc, top + dr)
            for dr in range(height)
            for dc in range(width)
            if (left + dc, top + dr) != (column, row)
        ]


class DefaultConstraint(GroupConstraint):
    """Classic Sudoku rules: rows, columns and blocks."""

    _parts = (RowConstraint(), ColumnConstraint(), BlockConstraint())

    def peer_values(self, grid: SudokuGrid, column: int, row: int) -> list[Cell]:
        values: list[Cell] = []
        for part in self._parts:
            values.extend(part.peer_values(grid, column, row))
        return values

    def groups(self, grid: SudokuGrid) -> list[list[Coord]]:
        return [group for part in self._parts for group in part.groups(grid)]

    def peers(self, grid: SudokuGrid, column: int, row: int) -> list[Coord]:
        return _merge(*(part.peers(grid, column, row) for part in self._parts))


class DiagonalsConstraint(GroupConstraint):
    """Both main diagonals contain every digit at most once (X-Sudoku)."""

    def peer_values(self, grid: SudokuGrid, column: int, row: int) -> list[Cell]:
        size = grid.size
        values: list[Cell] = []
        if column == row:
            values.extend(grid.get_cell(i, i) for i in range(size) if i != column)
        if column + row == size - 1:
            values.extend(
                grid.get_cell(i, size - 1 - i) for i in range(size) if i != column
            )
        return values

    def groups(self, grid: SudokuGrid) -> list[list[Coord]]:
        size = grid.size
        return [
            [(i, i) for i in range(size)],
            [(i, size - 1 - i) for i in range(size)],
        ]

    def peers(self, grid: SudokuGrid, column: int, row: int) -> list[Coord]:
        size = grid.size
        coords: list[Coord] = []
        if column == row:
            coords.extend((i, i) for i in range(size) if i != column)
        if column + row == size - 1:
            coords.extend((i, size - 1 - i) for i in range(size) if i != column)
        return coords


class _OffsetConstraint(Constraint):
    """
    Relates each cell to the cells reachable by any of ``offsets``.

    Unless a subclass says otherwise, those cells must hold different digits.
    """

    offsets: tuple[Coord, ...] = ()

    def neighbours(self, grid: SudokuGrid, column: int, row: int) -> list[Coord]:
        size = grid.size
        return [
            (column + dc, row + dr)
            for dc, dr in self.offsets
            if 0 <= column + dc < size and 0 <= row + dr < size
        ]

    def check_number(
        self, grid: SudokuGrid, column: int, row: int, number: int
    ) -> bool:
        return all(
            grid.get_cell(c, r) != number
            for c, r in self.neighbours(grid, column, row)
        )

    def candidates(self, grid: SudokuGrid, column: int, row: int) -> list[int]:
        used = {grid.get_cell(c, r) for c, r in self.neighbours(grid, column, row)}
        return [number for number in range(1, grid.size + 1) if number not in used]

    def peers(self, grid: SudokuGrid, column: int, row: int) -> list[Coord]:
        return self.neighbours(grid, column, row)


class KnightsMoveConstraint(_OffsetConstraint):
    """Cells a chess knight's move apart never share a digit."""

    offsets = (
        (1, 2), (2, 1), (2, -1), (1, -2),
        (-1, -2), (-2, -1), (-2, 1), (-1, 2),
    )


class KingsMoveConstraint(_OffsetConstraint):
    """Cells a chess king's move apart never share a digit."""

    offsets = (
        (-1, -1), (0, -1), (1, -1),
        (-1, 0), (1, 0),
        (-1, 1), (0, 1), (1, 1),
    )


class AdjacentConsecutiveConstraint(_OffsetConstraint):
    """Orthogonally adjacent cells never hold consecutive digits."""

    offsets = ((-1, 0), (1, 0), (0, -1), (0, 1))

    def check_number(
        self, grid: SudokuGrid, column: int, row: int, number: int
    ) -> bool:
        for c, r in self.neighbours(grid, column, row):
            neighbour = grid.get_cell(c, r)
            if neighbour is not None and abs(neighbour - number) == 1:
                return False
        return True

    def candidates(self, grid: SudokuGrid, column: int, row: int) -> list[int]:
        excluded: set[int] = set()
        for c, r in self.neighbours(grid, column, row):
            neighbour = grid.get_cell(c, r)
            if neighbour is not None:
                excluded.update((neighbour - 1, neighbour + 1))
        return [
            number for number in range(1, grid.size + 1) if number not in excluded
        ]


class CompositeConstraint(Constraint):
    """Accept a digit only if both wrapped constraints accept it."""

    def __init__(self, first: Constraint, second: Constraint):
        self.first = first
        self.second = second

    def check_number(
        self, grid: SudokuGrid, column: int, row: int, number: int
    ) -> bool:
        return self.first.check_number(
            grid, column, row, number
        ) and self.second.check_number(grid, column, row, number)

    def candidates(self, grid: SudokuGrid, column: int, row: int) -> list[int]:
        accepted = set(self.second.candidates(grid, column, row))
        return [
            number
            for number in self.first.candidates(grid, column, row)
            if number in accepted
        ]

    def groups(self, grid: SudokuGrid) -> list[list[Coord]]:
        return self.first.groups(grid) + self.second.groups(grid)

    def peers(self, grid: SudokuGrid, column: int, row: int) -> list[Coord]:
        return _merge(
            self.first.peers(grid, column, row), self.second.peers(grid, column, row)
        )
