"""Tests for settings, factories and the generate-then-reduce pipeline."""

import pytest
from pydantic import ValidationError

from sudokugen.config import GeneratorSettings, build_constraint, build_solver
from sudokugen.constraint import CompositeConstraint, DefaultConstraint, KnightsMoveConstraint
from sudokugen.generator import generate_puzzle
from sudokugen.solver import BacktrackingSolver, StrategicSolver

_ENV_NAMES = (
    "SUDOKU_BLOCK_WIDTH",
    "SUDOKU_BLOCK_HEIGHT",
    "SUDOKU_CONSTRAINT",
    "SUDOKU_SOLVER",
    "SUDOKU_SEED",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_defaults():
    settings = GeneratorSettings()

    assert settings.block_width == 3
    assert settings.block_height == 3
    assert settings.size == 9
    assert settings.constraint == "default"
    assert settings.solver == "backtracking"
    assert settings.seed is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"block_width": 0},
        {"block_height": -1},
        {"constraint": "sandwich"},
        {"solver": "oracle"},
    ],
)
def test_settings_validation(kwargs):
    with pytest.raises(ValidationError):
        GeneratorSettings(**kwargs)


def test_settings_from_env(clean_env):
    clean_env.setenv("SUDOKU_BLOCK_WIDTH", "2")
    clean_env.setenv("SUDOKU_BLOCK_HEIGHT", "4")
    clean_env.setenv("SUDOKU_CONSTRAINT", " Diagonals ")
    clean_env.setenv("SUDOKU_SOLVER", "strategic")
    clean_env.setenv("SUDOKU_SEED", "99")

    settings = GeneratorSettings.from_env()

    assert settings.block_width == 2
    assert settings.block_height == 4
    assert settings.constraint == "diagonals"
    assert settings.solver == "strategic"
    assert settings.seed == 99


def test_settings_from_env_falls_back_on_bad_numbers(clean_env):
    clean_env.setenv("SUDOKU_BLOCK_WIDTH", "wide")
    clean_env.setenv("SUDOKU_SEED", "not-a-seed")

    settings = GeneratorSettings.from_env()

    assert settings.block_width == 3
    assert settings.seed is None


@pytest.mark.parametrize("raw,expected", [("-5", -5), ("0", 0), (" 17 ", 17), ("", None)])
def test_settings_from_env_keeps_any_integer_seed(clean_env, raw, expected):
    clean_env.setenv("SUDOKU_SEED", raw)

    assert GeneratorSettings.from_env().seed == expected


def test_settings_from_empty_env(clean_env):
    assert GeneratorSettings.from_env() == GeneratorSettings()


def test_build_constraint():
    assert isinstance(build_constraint("default"), DefaultConstraint)

    knights = build_constraint("knights-move")
    assert isinstance(knights, CompositeConstraint)
    assert isinstance(knights.second, KnightsMoveConstraint)

    with pytest.raises(ValueError, match="Unknown constraint"):
        build_constraint("sandwich")


def test_build_solver():
    assert isinstance(build_solver("backtracking"), BacktrackingSolver)
    assert isinstance(build_solver("strategic"), StrategicSolver)
    assert build_solver("backtracking") is not build_solver("backtracking")

    with pytest.raises(ValueError, match="Unknown solver"):
        build_solver("oracle")


def test_generate_puzzle_returns_puzzle_and_solution():
    settings = GeneratorSettings(block_width=2, block_height=2, seed=8)

    puzzle, solution = generate_puzzle(settings)

    assert solution.is_full()
    assert puzzle.grid.count_clues() < 16
    for column, row in puzzle.grid.cells():
        number = puzzle.grid.get_cell(column, row)
        assert number is None or number == solution.get_cell(column, row)

    result = BacktrackingSolver().solve(puzzle)
    assert result.is_unique
    assert result.grid == solution


@pytest.mark.parametrize(
    "constraint,width,height",
    [
        ("default", 2, 2),
        ("diagonals", 2, 2),
        ("diagonals", 3, 3),
        ("knights-move", 2, 2),
        # No 4x4 grid obeys the king's move or the non-consecutive rule.
        ("kings-move", 3, 2),
        ("adjacent-consecutive", 3, 2),
    ],
)
def test_generate_puzzle_with_each_rule_set(constraint, width, height):
    settings = GeneratorSettings(
        block_width=width, block_height=height, constraint=constraint, seed=5
    )
    size = settings.size

    puzzle, solution = generate_puzzle(settings)

    assert puzzle.is_valid()
    assert puzzle.grid.count_clues() < size * size
    assert puzzle.constraint.check(solution)
    result = BacktrackingSolver().solve(puzzle)
    assert result.is_unique
    assert result.grid == solution


def test_generate_puzzle_is_reproducible():
    settings = GeneratorSettings(seed=12, solver="strategic")

    first, _ = generate_puzzle(settings)
    second, _ = generate_puzzle(settings)

    assert first.grid == second.grid
