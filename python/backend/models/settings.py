"""Run settings passed explicitly from the CLI to the frontends."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

DEFAULT_REPORT_INTERVAL = 7.0


class Verbosity(StrEnum):
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def level(self) -> int:
        return {
            Verbosity.DEBUG: logging.DEBUG,
            Verbosity.INFO: logging.INFO,
            Verbosity.WARN: logging.WARNING,
            Verbosity.ERROR: logging.ERROR,
        }[self]


class Algorithm(StrEnum):
    DEPTH_FIRST = "dfs"
    BREADTH_FIRST = "bfs"


@dataclass(frozen=True)
class RunSettings:
    verbosity: Verbosity = Verbosity.ERROR
    silent: bool = False
    benchmark: bool = False
    algorithm: Algorithm = Algorithm.DEPTH_FIRST
    report_interval: float = DEFAULT_REPORT_INTERVAL

    @property
    def reports_progress(self) -> bool:
        """Timing and report cards are shown for ``--benchmark`` and for the
        two most verbose levels."""
        return self.benchmark or self.verbosity in (Verbosity.DEBUG, Verbosity.INFO)
