"""Set of boards already seen during one solve."""

from __future__ import annotations

from backend.models.board import Board


class VisitedRegistry:
    """Deduplicates boards by their shape pattern (``Board.__eq__``).

    Grows for the whole solve; nothing is ever evicted.
    """

    def __init__(self) -> None:
        self._seen: set[Board] = set()

    def contains(self, board: Board) -> bool:
        return board in self._seen

    def insert(self, board: Board) -> bool:
        """Record *board*. Returns False if an equal board was already seen."""
        if board in self._seen:
            return False
        self._seen.add(board)
        return True

    def __contains__(self, board: object) -> bool:
        return board in self._seen

    def __len__(self) -> int:
        return len(self._seen)
