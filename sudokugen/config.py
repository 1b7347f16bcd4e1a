"""Generation settings and name-based factories for constraints and solvers."""

from __future__ import annotations

import os
from typing import Literal, Optional, TypeVar

from pydantic import BaseModel, Field

from .constraint import (
    AdjacentConsecutiveConstraint,
    CompositeConstraint,
    Constraint,
    DefaultConstraint,
    DiagonalsConstraint,
    KingsMoveConstraint,
    KnightsMoveConstraint,
)
from .solver import BacktrackingSolver, Solver, StrategicSolver

_T = TypeVar("_T", int, str)

ConstraintName = Literal[
    "default", "diagonals", "knights-move", "kings-move", "adjacent-consecutive"
]
SolverName = Literal["backtracking", "strategic"]


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        return default


def _env_optional_int(name: str) -> Optional[int]:
    """Read an integer environment variable; unset, blank or unparseable gives None."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


class GeneratorSettings(BaseModel):
    """Parameters for generating one puzzle."""

    block_width: int = Field(default=3, ge=1, description="Width of one block")
    block_height: int = Field(default=3, ge=1, description="Height of one block")
    constraint: ConstraintName = Field(
        default="default", description="Rule set on top of rows, columns and blocks"
    )
    solver: SolverName = Field(
        default="backtracking",
        description="Solver judging uniqueness during reduction (difficulty)",
    )
    seed: Optional[int] = Field(
        default=None, description="Random seed; None for system entropy"
    )

    @property
    def size(self) -> int:
        return self.block_width * self.block_height

    @classmethod
    def from_env(cls) -> GeneratorSettings:
        """Build settings from ``SUDOKU_*`` environment variables."""
        return cls(
            block_width=_env("SUDOKU_BLOCK_WIDTH", 3),
            block_height=_env("SUDOKU_BLOCK_HEIGHT", 3),
            constraint=_env("SUDOKU_CONSTRAINT", "default").strip().lower(),
            solver=_env("SUDOKU_SOLVER", "backtracking").strip().lower(),
            seed=_env_optional_int("SUDOKU_SEED"),
        )


def build_constraint(name: str) -> Constraint:
    """Return the constraint registered under *name*."""
    if name == "default":
        return DefaultConstraint()
    if name == "diagonals":
        return CompositeConstraint(DefaultConstraint(), DiagonalsConstraint())
    if name == "knights-move":
        return CompositeConstraint(DefaultConstraint(), KnightsMoveConstraint())
    if name == "kings-move":
        return CompositeConstraint(DefaultConstraint(), KingsMoveConstraint())
    if name == "adjacent-consecutive":
        return CompositeConstraint(DefaultConstraint(), AdjacentConsecutiveConstraint())
    raise ValueError(f"Unknown constraint: {name}")


def build_solver(name: str) -> Solver:
    """Return a fresh solver registered under *name*."""
    if name == "backtracking":
        return BacktrackingSolver()
    if name == "strategic":
        return StrategicSolver()
    raise ValueError(f"Unknown solver: {name}")
