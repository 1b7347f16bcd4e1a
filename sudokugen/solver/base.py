"""Solver contract and the three-way solving outcome."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..grid import SudokuGrid
from ..sudoku import Sudoku


class SolutionKind(enum.Enum):
    IMPOSSIBLE = "impossible"
    UNIQUE = "unique"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class Solution:
    """Outcome of solving a puzzle. ``grid`` is set only for unique solutions."""

    kind: SolutionKind
    grid: Optional[SudokuGrid] = None

    @classmethod
    def impossible(cls) -> Solution:
        return cls(SolutionKind.IMPOSSIBLE)

    @classmethod
    def unique(cls, grid: SudokuGrid) -> Solution:
        return cls(SolutionKind.UNIQUE, grid)

    @classmethod
    def ambiguous(cls) -> Solution:
        return cls(SolutionKind.AMBIGUOUS)

    @property
    def is_impossible(self) -> bool:
        return self.kind is SolutionKind.IMPOSSIBLE

    @property
    def is_unique(self) -> bool:
        return self.kind is SolutionKind.UNIQUE

    @property
    def is_ambiguous(self) -> bool:
        return self.kind is SolutionKind.AMBIGUOUS


class Solver(ABC):
    """Decides whether a puzzle has no, exactly one, or several completions."""

    @abstractmethod
    def solve(self, sudoku: Sudoku) -> Solution:
        """Solve ``sudoku`` without modifying it."""
