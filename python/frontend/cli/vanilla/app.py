"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib ``print`` and ``logging`` for output. The move list goes to
stdout one ``fromRow fromCol toRow toCol`` line per move so it can be piped
into other tools; diagnostics go to stderr through logging.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from backend.engine.puzzlesolver import Solver, SolveResult
from backend.engine.searchstate import ProgressSnapshot
from backend.models import ConfigurationError, PuzzleFile, RunSettings
from frontend.cli.logs import PLAIN_FORMAT, log_to

logger = logging.getLogger(__name__)


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}" if m else f"{seconds:.2f}s"


# -- reporting ----------------------------------------------------------------


def _report_card(snapshot: ProgressSnapshot) -> None:
    print(
        "Report card:\n"
        f"\tElapsed time: {_format_time(snapshot.elapsed_seconds)}\n"
        f"\tBoards expanded: {snapshot.expansions}\n"
        f"\tFrontier size: {snapshot.frontier_size}\n"
        f"\tBoards seen: {snapshot.registry_size}",
        flush=True,
    )


def _print_result(result: SolveResult, settings: RunSettings) -> None:
    if result.solved:
        if not settings.silent:
            for move in result.moves:
                print(move)
        if settings.reports_progress and result.stats is not None:
            print(
                f"Solved the puzzle in {_format_time(result.stats.elapsed_seconds)} "
                f"({len(result.moves)} moves, {result.stats.expansions} boards expanded)."
            )
        return

    logger.warning("No solution to the puzzle could be found.")
    if settings.reports_progress and result.stats is not None:
        print(
            f"Gave up after {_format_time(result.stats.elapsed_seconds)} "
            f"({result.stats.registry_size} boards seen)."
        )


# -- public entry point -------------------------------------------------------


def run(initial: Path, goal: Path, settings: RunSettings) -> int:
    """Solve the puzzle described by *initial* and *goal*.

    Returns the process exit code: 0 when solved, 1 otherwise.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    with log_to(handler, settings.verbosity):
        try:
            start = PuzzleFile.load_start(initial)
            target = PuzzleFile.load_goal(goal, start.rows, start.cols)
        except (ConfigurationError, OSError) as exc:
            logger.error("Cannot load puzzle: %s", exc)
            return 1

        result = Solver.solve(
            start,
            target,
            algorithm=settings.algorithm,
            on_progress=_report_card if settings.reports_progress else None,
            report_interval=settings.report_interval,
        )
        _print_result(result, settings)
        sys.stdout.flush()
        return 0 if result.solved else 1
