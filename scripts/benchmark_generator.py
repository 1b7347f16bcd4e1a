"""Benchmark puzzle generation and reduction runtime."""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import get_args

import numpy as np

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sudokugen.config import (
    ConstraintName,
    GeneratorSettings,
    SolverName,
    build_constraint,
    build_solver,
)
from sudokugen.generator import Generator, Reducer

LOGGER = logging.getLogger("benchmark_generator")


@dataclass
class RoundResult:
    generate_seconds: float
    reduce_seconds: float
    clues: int


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    defaults = GeneratorSettings.from_env()
    parser = argparse.ArgumentParser(description="Benchmark Sudoku generation")
    parser.add_argument("--block-width", type=int, default=defaults.block_width)
    parser.add_argument("--block-height", type=int, default=defaults.block_height)
    parser.add_argument(
        "--constraint",
        default=defaults.constraint,
        choices=get_args(ConstraintName),
        help="Rule set on top of rows, columns and blocks",
    )
    parser.add_argument(
        "--solver",
        default=defaults.solver,
        choices=get_args(SolverName),
        help="Reduction solver: backtracking (hardest) or strategic",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=5,
        help="Number of puzzles to generate",
    )
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def run_round(settings: GeneratorSettings, rng: random.Random) -> RoundResult:
    constraint = build_constraint(settings.constraint)

    start = time.perf_counter()
    sudoku = Generator(rng).generate(
        settings.block_width, settings.block_height, constraint
    )
    generated = time.perf_counter()

    Reducer(build_solver(settings.solver), rng).reduce(sudoku)
    reduced = time.perf_counter()

    return RoundResult(
        generate_seconds=generated - start,
        reduce_seconds=reduced - generated,
        clues=sudoku.grid.count_clues(),
    )


def summarize(results: list[RoundResult]) -> dict[str, float]:
    """Aggregate per-round timings and clue counts."""
    if not results:
        raise ValueError("No benchmark rounds to summarize")

    clues = np.array([result.clues for result in results], dtype=np.int64)
    generate = np.array([result.generate_seconds for result in results])
    reduce_ = np.array([result.reduce_seconds for result in results])

    return {
        "rounds": float(len(results)),
        "clues_mean": float(np.mean(clues)),
        "clues_median": float(np.median(clues)),
        "clues_min": float(np.min(clues)),
        "clues_max": float(np.max(clues)),
        "generate_avg": float(np.mean(generate)),
        "reduce_avg": float(np.mean(reduce_)),
    }


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.debug)

    settings = GeneratorSettings(
        block_width=args.block_width,
        block_height=args.block_height,
        constraint=args.constraint,
        solver=args.solver,
        seed=args.seed,
    )
    rng = random.Random(settings.seed)

    results = []
    for index in range(args.rounds):
        result = run_round(settings, rng)
        LOGGER.debug(
            "round=%d clues=%d generate=%.3fs reduce=%.3fs",
            index,
            result.clues,
            result.generate_seconds,
            result.reduce_seconds,
        )
        results.append(result)

    stats = summarize(results)

    print("Generation benchmark results")
    print(
        f"grid={settings.size}x{settings.size} constraint={settings.constraint} "
        f"solver={settings.solver} rounds={args.rounds} seed={settings.seed}"
    )
    print(
        f"clues_mean={stats['clues_mean']:.1f} clues_median={stats['clues_median']:.1f} "
        f"clues_min={stats['clues_min']:.0f} clues_max={stats['clues_max']:.0f}"
    )
    print(
        f"generate_avg={stats['generate_avg']:.3f}s "
        f"reduce_avg={stats['reduce_avg']:.3f}s"
    )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
