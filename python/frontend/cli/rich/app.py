"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same solver
and settings as the vanilla CLI. Logging goes through ``RichHandler``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.puzzlesolver import Solver, SolveResult
from backend.engine.searchstate import ProgressSnapshot
from backend.models import Board, ConfigurationError, PuzzleFile, RunSettings
from frontend.cli.logs import log_to

console = Console()
logger = logging.getLogger(__name__)

# Cycled by piece order number so neighbouring pieces are told apart.
_PIECE_STYLES = ("bold cyan", "bold yellow", "bold green", "bold magenta", "bold blue", "bold red")


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}" if m else f"{seconds:.2f}s"


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(len(board.pieces))) if board.pieces else 1
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.cols):
        table.add_column(width=width + 1, justify="center")

    for row in board.labels():
        cells: list[str] = []
        for val in row:
            if val is None:
                cells.append("[dim]·[/dim]")
            else:
                style = _PIECE_STYLES[(val - 1) % len(_PIECE_STYLES)]
                cells.append(f"[{style}]{val:>{width}}[/{style}]")
        table.add_row(*cells)

    return table


def _render_moves(result: SolveResult) -> Table:
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        show_lines=False,
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("From", justify="center", style="yellow")
    table.add_column("To", justify="center", style="yellow")
    table.add_column("Dir", style="cyan")
    for i, move in enumerate(result.moves, 1):
        table.add_row(
            str(i),
            f"{move.from_row},{move.from_col}",
            f"{move.to_row},{move.to_col}",
            move.direction.value,
        )
    return table


# -- reporting ----------------------------------------------------------------


def _report_card(snapshot: ProgressSnapshot) -> None:
    stats = Text()
    stats.append("  Elapsed: ", style="dim")
    stats.append(_format_time(snapshot.elapsed_seconds), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(snapshot.expansions), style="bold yellow")
    stats.append("    Frontier: ", style="dim")
    stats.append(str(snapshot.frontier_size), style="bold yellow")
    stats.append("    Seen: ", style="dim")
    stats.append(str(snapshot.registry_size), style="bold yellow")
    console.print(stats)


def _draw_start(start: Board, target: Board, settings: RunSettings) -> None:
    group = Group(
        Align.center(Text("Start", style="bold")),
        Align.center(_render_board(start)),
        Align.center(Text("Goal", style="bold")),
        Align.center(_render_board(target)),
    )
    panel = Panel(
        group,
        title=f"[bold cyan]Blocks  {start.rows}×{start.cols}  ({settings.algorithm.value})[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(Align.center(panel))


def _draw_result(result: SolveResult, settings: RunSettings) -> None:
    if not result.solved:
        logger.warning("No solution to the puzzle could be found.")
        console.print(Align.center(Text("No solution found.", style="bold red")))
    else:
        summary = Text()
        summary.append("★ ", style="bold yellow")
        summary.append(f"Solved in {len(result.moves)} moves", style="bold green")
        summary.append(" ★", style="bold yellow")

        parts: list[Align] = [Align.center(summary)]
        if not settings.silent and result.moves:
            parts.append(Align.center(_render_moves(result)))
        console.print(
            Panel(
                Group(*parts),
                title="[bold green]Solution[/bold green]",
                border_style="bold green",
                padding=(1, 2),
            )
        )

    if settings.reports_progress and result.stats is not None:
        _report_card(result.stats)


# -- public entry point -------------------------------------------------------


def run(initial: Path, goal: Path, settings: RunSettings) -> int:
    """Solve the puzzle and render the outcome with Rich.

    Returns the process exit code: 0 when solved, 1 otherwise.
    """
    handler = RichHandler(console=Console(stderr=True), show_path=False)

    with log_to(handler, settings.verbosity):
        try:
            start = PuzzleFile.load_start(initial)
            target = PuzzleFile.load_goal(goal, start.rows, start.cols)
        except (ConfigurationError, OSError) as exc:
            logger.error("Cannot load puzzle: %s", exc)
            return 1

        _draw_start(start, target, settings)
        with console.status("[cyan]Searching…[/cyan]", spinner="dots"):
            result = Solver.solve(
                start,
                target,
                algorithm=settings.algorithm,
                on_progress=_report_card if settings.reports_progress else None,
                report_interval=settings.report_interval,
            )
        _draw_result(result, settings)
        return 0 if result.solved else 1
