"""Random generation of completely filled grids."""

from __future__ import annotations

import logging
import random
from typing import Iterator, Optional

from ..constraint import Constraint
from ..errors import UnsatisfiableConstraintError
from ..sudoku import Sudoku
from .shuffle import shuffle

_LOGGER = logging.getLogger(__name__)


class Generator:
    """
    Randomly generates full puzzles, that is, grids with no missing digits.

    The random source decides the content; a seeded ``random.Random`` makes
    the output reproducible.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def generate(
        self, block_width: int, block_height: int, constraint: Constraint
    ) -> Sudoku:
        """
        Generate a new random full puzzle matching the given parameters.

        Args:
            block_width: Horizontal dimension of one block, also the number of
                blocks stacked vertically. 3 for ordinary Sudoku.
            block_height: Vertical dimension of one block, also the number of
                blocks side by side. 3 for ordinary Sudoku.
            constraint: Rule set the generated grid satisfies; kept by the
                returned puzzle.

        Returns:
            A puzzle whose grid is full and valid under ``constraint``

        Raises:
            InvalidDimensionsError: If a block dimension is zero
            UnsatisfiableConstraintError: If no full grid matches ``constraint``
        """
        sudoku = Sudoku.new_empty(block_width, block_height, constraint)

        if not self._fill(sudoku):
            _LOGGER.warning(
                "No %dx%d grid satisfies %s",
                block_width,
                block_height,
                type(constraint).__name__,
            )
            raise UnsatisfiableConstraintError(
                f"No {block_width}x{block_height} grid satisfies "
                f"{type(constraint).__name__}"
            )

        return sudoku

    def _fill(self, sudoku: Sudoku) -> bool:
        """
        Fill the grid cell by cell in row-major order, backtracking on dead ends.

        Each stack frame holds the untried candidates of one cell; the frame
        index is the cell's row-major position.
        """
        grid = sudoku.grid
        size = grid.size
        cells = size * size
        frames: list[Iterator[int]] = [self._shuffled_numbers(size)]
        backtracks = 0

        while frames:
            position = len(frames) - 1
            row, column = divmod(position, size)
            # Undo the previous trial at this cell, if any.
            grid.clear_cell(column, row)

            for number in frames[-1]:
                if sudoku.is_valid_number(column, row, number):
                    grid.set_cell(column, row, number)
                    break
            else:
                frames.pop()
                backtracks += 1
                continue

            if position + 1 == cells:
                _LOGGER.debug(
                    "Generated %dx%d grid after %d backtracks", size, size, backtracks
                )
                return True

            frames.append(self._shuffled_numbers(size))

        return False

    def _shuffled_numbers(self, size: int) -> Iterator[int]:
        return iter(shuffle(range(1, size + 1), self.rng))
