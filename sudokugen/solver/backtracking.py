"""Sudoku solver using backtracking algorithm."""

from __future__ import annotations

from typing import Optional

from ..constraint import Coord
from ..grid import SudokuGrid
from ..sudoku import Sudoku
from .base import Solution, Solver

Candidates = dict[Coord, list[int]]
Placement = tuple[int, int, int]


class BacktrackingSolver(Solver):
    """
    Solves puzzles by exhaustive backtracking.

    The candidates of every empty cell are kept between steps; placing a digit
    only refreshes the constraint's peers of that cell. Each step branches on
    the narrowest choice: the empty cell with the fewest candidates, or a digit
    with the fewest possible cells in one of the constraint's groups. Stops
    once a second completion is found, so it tells unique puzzles from
    ambiguous ones for any constraint.
    """

    def __init__(self):
        self.solutions_count = 0
        self._first_solution: Optional[SudokuGrid] = None
        self._candidates: Candidates = {}
        self._groups: list[list[Coord]] = []
        self._peers: dict[Coord, list[Coord]] = {}

    def solve(self, sudoku: Sudoku) -> Solution:
        """
        Solve a puzzle.

        Args:
            sudoku: Puzzle to solve; it is not modified

        Returns:
            Unique solution with the completed grid, or impossible/ambiguous
        """
        count = self.count_solutions(sudoku, max_count=2)
        if count == 0:
            return Solution.impossible()
        if count == 1:
            return Solution.unique(self._first_solution)
        return Solution.ambiguous()

    def count_solutions(self, sudoku: Sudoku, max_count: int = 2) -> int:
        """
        Count number of solutions (up to max_count).

        Args:
            sudoku: Puzzle to solve
            max_count: Stop counting after finding this many solutions

        Returns:
            Number of solutions found
        """
        self.solutions_count = 0
        self._first_solution = None
        work = sudoku.copy()
        if not work.is_valid():
            return 0

        grid = work.grid
        constraint = work.constraint
        self._candidates = {
            (column, row): constraint.candidates(grid, column, row)
            for column, row in grid.cells()
            if grid.get_cell(column, row) is None
        }
        # A full-size group of distinct digits holds every digit once.
        self._groups = [
            group for group in constraint.groups(grid) if len(group) == grid.size
        ]
        self._peers = {}

        self._count_solutions_recursive(work, max_count)
        return self.solutions_count

    def _count_solutions_recursive(self, sudoku: Sudoku, max_count: int) -> None:
        """Recursively count solutions, stopping at max_count."""
        if self.solutions_count >= max_count:
            return

        if not self._candidates:
            self.solutions_count += 1
            if self._first_solution is None:
                self._first_solution = sudoku.grid.copy()
            return

        for column, row, number in self._choose_branch(sudoku.grid):
            replaced = self._place(sudoku, column, row, number)
            self._count_solutions_recursive(sudoku, max_count)
            sudoku.grid.clear_cell(column, row)
            self._candidates.update(replaced)

            if self.solutions_count >= max_count:
                return

    def _choose_branch(self, grid: SudokuGrid) -> list[Placement]:
        """
        Find the narrowest set of alternatives for the next placement.

        Returns:
            (column, row, number) placements, exactly one of which holds in
            any completion. Empty at a dead end.
        """
        candidates = self._candidates
        best_cell: Optional[Coord] = None
        best_count = grid.size + 1

        for coord, options in candidates.items():
            if len(options) < best_count:
                best_cell, best_count = coord, len(options)
                if best_count <= 1:
                    break

        column, row = best_cell
        best = [(column, row, number) for number in candidates[best_cell]]
        if len(best) <= 1:
            return best

        for group in self._groups:
            placed = set()
            spots: dict[int, list[Coord]] = {}
            for coord in group:
                options = candidates.get(coord)
                if options is None:
                    placed.add(grid.get_cell(*coord))
                    continue
                for number in options:
                    spots.setdefault(number, []).append(coord)

            for number in range(1, grid.size + 1):
                if number in placed:
                    continue
                cells = spots.get(number, [])
                if len(cells) < len(best):
                    best = [(column, row, number) for column, row in cells]
                    if len(best) <= 1:
                        return best

        return best

    def _place(self, sudoku: Sudoku, column: int, row: int, number: int) -> Candidates:
        """Write a digit and refresh its peers; returns the entries replaced."""
        grid = sudoku.grid
        constraint = sudoku.constraint
        candidates = self._candidates

        replaced = {(column, row): candidates.pop((column, row))}
        grid.set_cell(column, row, number)

        for peer in self._peers_of(sudoku, column, row):
            if peer in candidates:
                replaced[peer] = candidates[peer]
                candidates[peer] = constraint.candidates(grid, *peer)
        return replaced

    def _peers_of(self, sudoku: Sudoku, column: int, row: int) -> list[Coord]:
        peers = self._peers.get((column, row))
        if peers is None:
            peers = sudoku.constraint.peers(sudoku.grid, column, row)
            self._peers[(column, row)] = peers
        return peers
