"""Clue removal that keeps a puzzle uniquely solvable."""

from __future__ import annotations

import logging
import random
from typing import Optional

from ..solver.backtracking import BacktrackingSolver
from ..solver.base import Solver
from ..sudoku import Sudoku
from .shuffle import shuffle

_LOGGER = logging.getLogger(__name__)


class Reducer:
    """
    Removes digits from a full puzzle while the solver can still solve it.

    The solver sets the difficulty: every remaining clue is one the solver
    needs. The default ``BacktrackingSolver`` is perfect, so it yields the
    hardest puzzles. The random source decides which digits go first.
    """

    def __init__(
        self, solver: Optional[Solver] = None, rng: Optional[random.Random] = None
    ):
        self.solver = solver if solver is not None else BacktrackingSolver()
        self.rng = rng if rng is not None else random.Random()

    def reduce(self, sudoku: Sudoku) -> None:
        """
        Remove random digits until every remaining one is necessary.

        Each cell is tried once, in random order. A removal is kept only if
        the solver reports a unique solution; otherwise the digit is put back.
        The puzzle is modified in place.
        """
        grid = sudoku.grid
        size = grid.size
        coords = [(column, row) for column in range(size) for row in range(size)]
        removed = 0
        kept = 0

        for column, row in shuffle(coords, self.rng):
            number = grid.get_cell(column, row)
            if number is None:
                continue

            grid.clear_cell(column, row)

            if self.solver.solve(sudoku).is_unique:
                removed += 1
            else:
                grid.set_cell(column, row, number)
                kept += 1

        _LOGGER.debug(
            "Reduced %dx%d grid: removed=%d kept=%d solver=%s",
            size,
            size,
            removed,
            kept,
            type(self.solver).__name__,
        )
