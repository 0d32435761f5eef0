"""Counters describing a search in progress."""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(frozen=True)
class ProgressSnapshot:
    expansions: int
    frontier_size: int
    registry_size: int
    elapsed_seconds: float


class SearchStats:
    """Holds the expansion count, frontier/registry sizes and elapsed time.

    Only the search driver writes these; a reporter thread may read them at
    any time and accepts slightly stale values.
    """

    def __init__(self) -> None:
        self.expansions: int = 0
        self.frontier_size: int = 0
        self.registry_size: int = 0
        self._start_time: float = time.time()
        self._end_time: float | None = None

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        end = self._end_time if self._end_time is not None else time.time()
        return end - self._start_time

    def restart_clock(self) -> None:
        self._start_time = time.time()
        self._end_time = None

    def stop_clock(self) -> None:
        if self._end_time is None:
            self._end_time = time.time()

    # -- counters -------------------------------------------------------------

    def record(self, frontier_size: int, registry_size: int) -> None:
        """Count one expansion and the sizes it left behind."""
        self.expansions += 1
        self.frontier_size = frontier_size
        self.registry_size = registry_size

    def snapshot(self) -> ProgressSnapshot:
        return ProgressSnapshot(
            expansions=self.expansions,
            frontier_size=self.frontier_size,
            registry_size=self.registry_size,
            elapsed_seconds=self.elapsed_time,
        )
