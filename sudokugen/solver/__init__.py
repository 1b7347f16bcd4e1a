"""Solvers deciding whether a puzzle has a unique completion."""

from .backtracking import BacktrackingSolver
from .base import Solution, SolutionKind, Solver
from .strategic import HiddenSingleStrategy, NakedSingleStrategy, StrategicSolver, Strategy

__all__ = [
    "BacktrackingSolver",
    "HiddenSingleStrategy",
    "NakedSingleStrategy",
    "Solution",
    "SolutionKind",
    "Solver",
    "StrategicSolver",
    "Strategy",
]
