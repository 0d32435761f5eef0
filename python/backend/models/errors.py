"""Error types raised by the board model and the search engine."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A puzzle description that cannot be turned into a valid board.

    Raised for overlapping or out-of-bounds pieces, bad grid dimensions and
    malformed puzzle files. The affected board is unusable.
    """


class InvariantViolation(RuntimeError):
    """Internal consistency failure, e.g. a grid cell naming a missing piece."""
