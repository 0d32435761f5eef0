#!/usr/bin/env python3
"""Sliding-Block Puzzle Solver.

Usage::

    python main.py start.txt goal.txt                 # print the move list
    python main.py -f rich start.txt goal.txt         # Rich terminal output
    python main.py -v info --alg bfs start.txt goal.txt
    python main.py --silent --benchmark start.txt goal.txt
"""

import importlib
import sys
from enum import StrEnum
from pathlib import Path

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.settings import (  # noqa: E402
    DEFAULT_REPORT_INTERVAL,
    Algorithm,
    RunSettings,
    Verbosity,
)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    initial: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True,
        help="Starting configuration: 'rows cols' then one 'h w row col' per piece.",
    ),
    goal: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True,
        help="Goal configuration: one 'h w row col' per piece.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    verbosity: Verbosity = typer.Option(
        Verbosity.ERROR, "-v", "--verbosity",
        help="Diagnostic output level (info and debug imply --benchmark).",
    ),
    silent: bool = typer.Option(
        False, "--silent",
        help="Do not print the move list.",
    ),
    benchmark: bool = typer.Option(
        False, "--benchmark",
        help="Report elapsed time and periodic search progress.",
    ),
    algorithm: Algorithm = typer.Option(
        Algorithm.DEPTH_FIRST, "--alg",
        help="Search strategy.",
    ),
    report_interval: float = typer.Option(
        DEFAULT_REPORT_INTERVAL, "--report-interval",
        min=0.01,
        help="Seconds between progress reports.",
    ),
) -> None:
    """Find a sequence of single-step moves turning INITIAL into GOAL."""
    settings = RunSettings(
        verbosity=verbosity,
        silent=silent,
        benchmark=benchmark,
        algorithm=algorithm,
        report_interval=report_interval,
    )
    mod = importlib.import_module(_RUNNERS[frontend])
    code = mod.run(initial, goal, settings)
    if code:
        raise typer.Exit(code)


if __name__ == "__main__":
    app()
