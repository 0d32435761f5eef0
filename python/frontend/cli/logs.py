"""Logging setup shared by the CLI frontends."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from backend.models.settings import Verbosity

# Format used by the original command-line tool's debug printer.
PLAIN_FORMAT = "[ %(levelname)s ]: %(message)s"


@contextmanager
def log_to(handler: logging.Handler, verbosity: Verbosity) -> Iterator[None]:
    """Attach *handler* to the ``backend`` and ``frontend`` loggers for the
    duration of a run."""
    loggers = [logging.getLogger("backend"), logging.getLogger("frontend")]
    previous = [lg.level for lg in loggers]
    handler.setLevel(verbosity.level)
    for lg in loggers:
        lg.setLevel(verbosity.level)
        lg.addHandler(handler)
    try:
        yield
    finally:
        for lg, level in zip(loggers, previous):
            lg.removeHandler(handler)
            lg.setLevel(level)
