"""Sliding-block puzzle solver."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import StrEnum

from backend.engine.movegenerator import MoveGenerator
from backend.engine.puzzlesolver.reporter import ProgressCallback, ProgressReporter
from backend.engine.searchstate import ProgressSnapshot, SearchStats, VisitedRegistry
from backend.models.board import Board, Move
from backend.models.errors import ConfigurationError
from backend.models.settings import DEFAULT_REPORT_INTERVAL, Algorithm

logger = logging.getLogger(__name__)


class SearchStatus(StrEnum):
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass
class SolveResult:
    status: SearchStatus
    moves: list[Move] = field(default_factory=list)
    stats: ProgressSnapshot | None = None

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED


class FrontierSearch:
    """Explores the board graph from *start* until a board equal to *goal*
    turns up or nothing is left to expand.

    Every board is registered as visited when it is pushed, which keeps
    each shape pattern on the frontier at most once. Subclasses decide
    which frontier board is expanded next.
    """

    name = "frontier"

    def __init__(
        self,
        start: Board,
        goal: Board,
        stats: SearchStats | None = None,
    ) -> None:
        self.goal = goal
        self.stats = stats if stats is not None else SearchStats()
        self.registry = VisitedRegistry()
        self.frontier: deque[Board] = deque([start])
        self.registry.insert(start)
        self.stats.frontier_size = 1
        self.stats.registry_size = 1
        self.status = SearchStatus.RUNNING
        self.solution: Board | None = None

    def _pop(self) -> Board:
        raise NotImplementedError

    def step(self) -> SearchStatus:
        """Expand one board. Does nothing once the search has finished."""
        if self.status is not SearchStatus.RUNNING:
            return self.status

        if not self.frontier:
            self._finish(SearchStatus.EXHAUSTED)
            return self.status

        current = self._pop()
        if current == self.goal:
            self.solution = current
            self._finish(SearchStatus.SOLVED)
            return self.status

        for successor in MoveGenerator.expand(current):
            if self.registry.insert(successor):
                self.frontier.append(successor)
        self.stats.record(len(self.frontier), len(self.registry))

        if not self.frontier:
            self._finish(SearchStatus.EXHAUSTED)
        return self.status

    def run(self) -> SolveResult:
        logger.debug("Starting %s search", self.name)
        self.stats.restart_clock()
        while self.step() is SearchStatus.RUNNING:
            pass
        return self.result()

    def result(self) -> SolveResult:
        moves = self.solution.reconstruct_path() if self.solution is not None else []
        return SolveResult(
            status=self.status,
            moves=moves,
            stats=self.stats.snapshot(),
        )

    def _finish(self, status: SearchStatus) -> None:
        self.status = status
        self.stats.stop_clock()
        logger.info(
            "Search %s after %d expansions (%d boards seen)",
            status.value, self.stats.expansions, len(self.registry),
        )


class DepthFirstSearch(FrontierSearch):
    """The frontier is a stack: the most recently discovered board is
    expanded next."""

    name = "depth-first"

    def _pop(self) -> Board:
        return self.frontier.pop()


class BreadthFirstSearch(FrontierSearch):
    """The frontier is a queue: boards are expanded in discovery order."""

    name = "breadth-first"

    def _pop(self) -> Board:
        return self.frontier.popleft()


class Solver:
    """Stateless solver — all methods are static."""

    STRATEGIES: dict[Algorithm, type[FrontierSearch]] = {
        Algorithm.DEPTH_FIRST: DepthFirstSearch,
        Algorithm.BREADTH_FIRST: BreadthFirstSearch,
    }

    @staticmethod
    def solve(
        start: Board,
        goal: Board,
        algorithm: Algorithm = Algorithm.DEPTH_FIRST,
        on_progress: ProgressCallback | None = None,
        report_interval: float = DEFAULT_REPORT_INTERVAL,
    ) -> SolveResult:
        """Search for a move sequence turning *start* into *goal*.

        If *on_progress* is given it receives a snapshot every
        *report_interval* seconds while the search runs.
        """
        if (start.rows, start.cols) != (goal.rows, goal.cols):
            raise ConfigurationError(
                f"Goal grid {goal.rows}x{goal.cols} does not match start "
                f"grid {start.rows}x{start.cols}."
            )

        strategy = Solver.STRATEGIES[Algorithm(algorithm)]
        stats = SearchStats()
        search = strategy(start, goal, stats)
        logger.info("Using %s search", search.name)

        if on_progress is None:
            return search.run()
        with ProgressReporter(stats, on_progress, report_interval):
            return search.run()
