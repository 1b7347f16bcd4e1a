"""Shared grids and assertions for sudokugen tests."""

from sudokugen.grid import SudokuGrid

SAMPLE_PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

SAMPLE_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


def assert_groups_are_permutations(grid: SudokuGrid) -> None:
    """Every row, column and block holds each digit exactly once."""
    expected = list(range(1, grid.size + 1))
    for index in range(grid.size):
        assert sorted(grid.row(index)) == expected, f"row {index}"
        assert sorted(grid.column(index)) == expected, f"column {index}"
    for top in range(0, grid.size, grid.block_height):
        for left in range(0, grid.size, grid.block_width):
            assert sorted(grid.block(left, top)) == expected, f"block at ({left}, {top})"
