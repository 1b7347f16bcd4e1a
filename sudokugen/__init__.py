"""Random generation and minimization of Sudoku-like puzzles."""

from .config import GeneratorSettings, build_constraint, build_solver
from .constraint import (
    AdjacentConsecutiveConstraint,
    BlockConstraint,
    ColumnConstraint,
    CompositeConstraint,
    Constraint,
    DefaultConstraint,
    DiagonalsConstraint,
    GroupConstraint,
    KingsMoveConstraint,
    KnightsMoveConstraint,
    RowConstraint,
)
from .errors import (
    InvalidDimensionsError,
    InvalidNumberError,
    OutOfBoundsError,
    SudokuError,
    UnsatisfiableConstraintError,
)
from .generator import Generator, Reducer, generate_puzzle, shuffle
from .grid import SudokuGrid
from .solver import BacktrackingSolver, Solution, SolutionKind, Solver, StrategicSolver
from .sudoku import Sudoku

__all__ = [
    "AdjacentConsecutiveConstraint",
    "BacktrackingSolver",
    "BlockConstraint",
    "ColumnConstraint",
    "CompositeConstraint",
    "Constraint",
    "DefaultConstraint",
    "DiagonalsConstraint",
    "Generator",
    "GeneratorSettings",
    "GroupConstraint",
    "InvalidDimensionsError",
    "InvalidNumberError",
    "KingsMoveConstraint",
    "KnightsMoveConstraint",
    "OutOfBoundsError",
    "Reducer",
    "RowConstraint",
    "Solution",
    "SolutionKind",
    "Solver",
    "StrategicSolver",
    "Sudoku",
    "SudokuError",
    "SudokuGrid",
    "UnsatisfiableConstraintError",
    "build_constraint",
    "build_solver",
    "generate_puzzle",
    "shuffle",
]
