"""Tests for the generation benchmark script."""

import pytest

from scripts.benchmark_generator import RoundResult, main, parse_args, summarize


def test_summarize_statistics():
    results = [
        RoundResult(generate_seconds=0.1, reduce_seconds=1.0, clues=24),
        RoundResult(generate_seconds=0.3, reduce_seconds=2.0, clues=26),
        RoundResult(generate_seconds=0.2, reduce_seconds=3.0, clues=28),
    ]

    stats = summarize(results)

    assert stats["rounds"] == 3
    assert stats["clues_mean"] == pytest.approx(26.0)
    assert stats["clues_median"] == pytest.approx(26.0)
    assert stats["clues_min"] == 24
    assert stats["clues_max"] == 28
    assert stats["generate_avg"] == pytest.approx(0.2)
    assert stats["reduce_avg"] == pytest.approx(2.0)


def test_summarize_requires_results():
    with pytest.raises(ValueError):
        summarize([])


def test_main_prints_report(capsys, monkeypatch):
    monkeypatch.delenv("SUDOKU_SEED", raising=False)

    exit_code = main(
        ["--block-width", "2", "--block-height", "2", "--rounds", "2", "--seed", "1"]
    )

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Generation benchmark results" in out
    assert "grid=4x4" in out
    assert "rounds=2" in out


@pytest.mark.parametrize(
    "argv", [["--constraint", "sandwich"], ["--solver", "oracle"], ["--constraint", "Default"]]
)
def test_parse_args_rejects_unknown_names(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(argv)

    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_parse_args_accepts_every_rule_set(monkeypatch):
    monkeypatch.delenv("SUDOKU_CONSTRAINT", raising=False)
    monkeypatch.delenv("SUDOKU_SOLVER", raising=False)

    for name in ("default", "diagonals", "knights-move", "kings-move", "adjacent-consecutive"):
        assert parse_args(["--constraint", name]).constraint == name
    assert parse_args([]).solver == "backtracking"
    assert parse_args(["--solver", "strategic"]).solver == "strategic"
