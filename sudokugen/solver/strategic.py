"""Deduction-only solver whose strategy set controls puzzle difficulty."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..sudoku import Sudoku
from .base import Solution, Solver

Coord = tuple[int, int]
Candidates = dict[Coord, list[int]]
Deduction = tuple[int, int, int]


class Strategy(ABC):
    """A human-style deduction rule."""

    @abstractmethod
    def deduce(self, sudoku: Sudoku, candidates: Candidates) -> list[Deduction]:
        """Return forced ``(column, row, number)`` placements, possibly none."""


class NakedSingleStrategy(Strategy):
    """A cell with exactly one candidate must hold it."""

    def deduce(self, sudoku: Sudoku, candidates: Candidates) -> list[Deduction]:
        return [
            (column, row, options[0])
            for (column, row), options in candidates.items()
            if len(options) == 1
        ]


class HiddenSingleStrategy(Strategy):
    """A digit with exactly one possible cell in a group must go there."""

    def deduce(self, sudoku: Sudoku, candidates: Candidates) -> list[Deduction]:
        grid = sudoku.grid
        deductions: list[Deduction] = []

        for group in sudoku.constraint.groups(grid):
            open_cells = [coord for coord in group if coord in candidates]
            if not open_cells:
                continue
            placed = {grid.get_cell(column, row) for column, row in group}

            for number in range(1, grid.size + 1):
                if number in placed:
                    continue
                spots = [coord for coord in open_cells if number in candidates[coord]]
                if len(spots) == 1:
                    column, row = spots[0]
                    deductions.append((column, row, number))

        return deductions


DEFAULT_STRATEGIES: tuple[Strategy, ...] = (NakedSingleStrategy(), HiddenSingleStrategy())


class StrategicSolver(Solver):
    """
    Solves a puzzle using only the given deduction strategies.

    Strategies are tried in order each round; the first one that finds
    anything wins the round. When none makes progress the puzzle is reported
    as ambiguous, since this solver cannot prove a unique completion. A
    reducer driven by a weaker strategy set therefore keeps more clues.
    """

    def __init__(self, strategies: Optional[Sequence[Strategy]] = None):
        self.strategies = (
            tuple(strategies) if strategies is not None else DEFAULT_STRATEGIES
        )

    def solve(self, sudoku: Sudoku) -> Solution:
        work = sudoku.copy()
        if not work.is_valid():
            return Solution.impossible()

        grid = work.grid
        constraint = work.constraint

        while True:
            candidates: Candidates = {}
            for column, row in grid.cells():
                if grid.get_cell(column, row) is not None:
                    continue
                options = constraint.candidates(grid, column, row)
                if not options:
                    return Solution.impossible()
                candidates[(column, row)] = options

            if not candidates:
                return Solution.unique(grid)

            deductions: list[Deduction] = []
            for strategy in self.strategies:
                deductions = strategy.deduce(work, candidates)
                if deductions:
                    break
            if not deductions:
                return Solution.ambiguous()

            for column, row, number in deductions:
                current = grid.get_cell(column, row)
                if current == number:
                    continue
                # Two forced placements disagree.
                if current is not None or not work.is_valid_number(column, row, number):
                    return Solution.impossible()
                grid.set_cell(column, row, number)
