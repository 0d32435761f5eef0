"""Command-line tests through typer's CliRunner."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from main import app

PUZZLES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures" / "puzzles"

runner = CliRunner()


def _args(name: str, *options: str) -> list[str]:
    return [
        *options,
        str(PUZZLES_DIR / f"{name}.start"),
        str(PUZZLES_DIR / f"{name}.goal"),
    ]


def test_prints_move_list() -> None:
    result = runner.invoke(app, _args("one-step"))
    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["0 0 0 1"]


def test_silent_suppresses_move_list() -> None:
    result = runner.invoke(app, _args("one-step", "--silent"))
    assert result.exit_code == 0
    assert "0 0 0 1" not in result.stdout


def test_benchmark_reports_timing() -> None:
    result = runner.invoke(app, _args("four-by-four", "--benchmark", "--silent"))
    assert result.exit_code == 0
    assert "Solved the puzzle in" in result.stdout


@pytest.mark.parametrize("alg", ["dfs", "bfs"])
def test_unsolvable_puzzle_exits_with_failure(alg: str) -> None:
    result = runner.invoke(app, _args("one-lane", "--alg", alg))
    assert result.exit_code == 1


def test_broken_puzzle_file_exits_with_failure(tmp_path: Path) -> None:
    start = tmp_path / "start.txt"
    goal = tmp_path / "goal.txt"
    start.write_text("2 2\n2 2 0 0\n1 1 0 0\n")
    goal.write_text("1 1 0 0\n")

    result = runner.invoke(app, [str(start), str(goal)])
    assert result.exit_code == 1


def test_missing_file_is_a_usage_error(tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "nope"), str(tmp_path / "nope")])
    assert result.exit_code == 2


def test_rich_frontend() -> None:
    result = runner.invoke(app, _args("tall-block", "-f", "rich", "-v", "info"))
    assert result.exit_code == 0, result.output
    assert "Solved in" in result.output


def test_undecodable_puzzle_file_exits_with_failure(tmp_path: Path) -> None:
    start = tmp_path / "start.txt"
    goal = tmp_path / "goal.txt"
    start.write_bytes(b"2 2\n1 1 0 0\n\xff\xfe\n")
    goal.write_text("1 1 0 1\n")

    result = runner.invoke(app, [str(start), str(goal)])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
