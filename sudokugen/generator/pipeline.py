"""Generate-then-reduce convenience entry point."""

from __future__ import annotations

import logging
import random

from ..config import GeneratorSettings, build_constraint, build_solver
from ..grid import SudokuGrid
from ..sudoku import Sudoku
from .generator import Generator
from .reducer import Reducer

_LOGGER = logging.getLogger(__name__)


def generate_puzzle(settings: GeneratorSettings) -> tuple[Sudoku, SudokuGrid]:
    """
    Generate a Sudoku puzzle and its solution.

    Args:
        settings: Dimensions, rule set, difficulty solver and seed

    Returns:
        tuple: (puzzle, solution), the reduced puzzle and the full grid it
        was reduced from.
    """
    rng = random.Random(settings.seed)
    constraint = build_constraint(settings.constraint)

    sudoku = Generator(rng).generate(
        settings.block_width, settings.block_height, constraint
    )
    solution = sudoku.grid.copy()

    Reducer(build_solver(settings.solver), rng).reduce(sudoku)

    _LOGGER.info(
        "Generated %dx%d %s puzzle with %d clues (solver=%s, seed=%s)",
        settings.size,
        settings.size,
        settings.constraint,
        sudoku.grid.count_clues(),
        settings.solver,
        settings.seed,
    )
    return sudoku, solution
