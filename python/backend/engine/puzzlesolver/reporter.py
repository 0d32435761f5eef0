"""Background progress reporting for long searches."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from backend.engine.searchstate import ProgressSnapshot, SearchStats

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ProgressSnapshot], None]


class ProgressReporter:
    """Hands a ``ProgressSnapshot`` to *callback* every *interval* seconds.

    Runs on a daemon thread and only reads *stats*. Use as a context manager
    around the search::

        with ProgressReporter(stats, print, 7.0):
            search.run()
    """

    def __init__(
        self,
        stats: SearchStats,
        callback: ProgressCallback,
        interval: float,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Report interval must be positive, got {interval}.")
        self.stats = stats
        self.callback = callback
        self.interval = interval
        self._stopped = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name="progress-reporter", daemon=True
        )

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._stopped.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> ProgressReporter:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _run(self) -> None:
        while not self._stopped.wait(self.interval):
            snapshot = self.stats.snapshot()
            logger.debug("Progress: %s", snapshot)
            self.callback(snapshot)
