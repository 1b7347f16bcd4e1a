"""Shared fixtures for sudokugen tests."""

import pytest

from sudokugen.constraint import DefaultConstraint
from sudokugen.grid import SudokuGrid
from sudokugen.sudoku import Sudoku
from tests.tools import SAMPLE_PUZZLE, SAMPLE_SOLUTION


@pytest.fixture
def sample_sudoku() -> Sudoku:
    grid = SudokuGrid.from_rows(3, 3, SAMPLE_PUZZLE)
    return Sudoku(grid, DefaultConstraint())


@pytest.fixture
def solved_sudoku() -> Sudoku:
    grid = SudokuGrid.from_rows(3, 3, SAMPLE_SOLUTION)
    return Sudoku(grid, DefaultConstraint())
