"""Board model for the sliding-block puzzle."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum

from backend.models.errors import ConfigurationError, InvariantViolation
from backend.models.piece import Identity, Piece, Shape

logger = logging.getLogger(__name__)


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Move:
    """One piece's one-cell displacement, by top-left corner."""

    from_row: int
    from_col: int
    to_row: int
    to_col: int

    @property
    def direction(self) -> Direction:
        delta = (self.to_row - self.from_row, self.to_col - self.from_col)
        for direction, d in _DELTAS.items():
            if d == delta:
                return direction
        raise ValueError(f"{self} is not a single-step move.")

    def __str__(self) -> str:
        return f"{self.from_row} {self.from_col} {self.to_row} {self.to_col}"


@dataclass(eq=False, repr=False)
class Board:
    """A grid of ``rows`` x ``cols`` cells holding non-overlapping pieces.

    The occupancy grid is derived from ``pieces`` when the board is built
    and never edited afterwards. ``parent`` and ``move`` link a board to the
    board it was derived from; both are ``None`` for a root board.

    Pieces must not be moved once the board is built: equality, hashing
    and cell lookups keep answering for the layout at construction. Move
    pieces on a ``copy()`` and build a new board from it instead.
    """

    rows: int
    cols: int
    pieces: tuple[Piece, ...]
    parent: Board | None = None
    move: Move | None = None

    _grid: list[list[Identity | None]] = field(init=False)
    _index: dict[Identity, Piece] = field(init=False)
    _pattern: tuple[Shape | None, ...] = field(init=False)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ConfigurationError(
                f"Grid must have at least one cell, got {self.rows}x{self.cols}."
            )
        self.pieces = tuple(self.pieces)
        self._index = {p.identity: p for p in self.pieces}
        self._grid = self._derive_grid()
        self._pattern = tuple(
            self.occupant_shape_at(r, c)
            for r in range(self.rows)
            for c in range(self.cols)
        )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_specs(
        cls,
        rows: int,
        cols: int,
        specs: Iterable[tuple[int, int, int, int]],
    ) -> Board:
        """Create a root board from ``(rowSpan, colSpan, row, col)`` specs.

        Example::

            Board.from_specs(2, 2, [(1, 1, 0, 0), (1, 1, 1, 1)])
        """
        board = cls(rows=rows, cols=cols, pieces=tuple(Piece.from_spec(s) for s in specs))
        logger.debug(
            "Created %dx%d board with %d pieces (hash %d)",
            rows, cols, len(board.pieces), hash(board),
        )
        return board

    def copy(self) -> Board:
        return Board(
            rows=self.rows,
            cols=self.cols,
            pieces=tuple(p.copy() for p in self.pieces),
            parent=self.parent,
            move=self.move,
        )

    def _derive_grid(self) -> list[list[Identity | None]]:
        grid: list[list[Identity | None]] = [
            [None] * self.cols for _ in range(self.rows)
        ]
        for piece in self.pieces:
            for r, c in piece.cells():
                if not (0 <= r < self.rows and 0 <= c < self.cols):
                    raise ConfigurationError(
                        f"{piece!r} leaves the {self.rows}x{self.cols} grid "
                        f"at cell ({r}, {c})."
                    )
                if grid[r][c] is not None:
                    raise ConfigurationError(
                        f"{piece!r} overlaps {self._index[grid[r][c]]!r} "
                        f"at cell ({r}, {c})."
                    )
                grid[r][c] = piece.identity
        return grid

    # -- queries --------------------------------------------------------------

    def is_valid(self) -> bool:
        """Re-derive the grid from ``pieces`` and report whether it fits."""
        try:
            self._derive_grid()
        except ConfigurationError:
            return False
        return True

    def occupant_at(self, row: int, col: int) -> Identity | None:
        return self._grid[row][col]

    def piece(self, identity: Identity) -> Piece:
        try:
            return self._index[identity]
        except KeyError:
            raise InvariantViolation(
                f"No piece with identity {identity} on this board."
            ) from None

    def occupant_shape_at(self, row: int, col: int) -> Shape | None:
        """Return the shape of the piece covering (row, col), or ``None``."""
        identity = self._grid[row][col]
        if identity is None:
            return None
        return self.piece(identity).shape

    def reconstruct_path(self) -> list[Move]:
        """Return the moves that led from the root board here, oldest first."""
        moves: list[Move] = []
        board: Board | None = self
        while board is not None:
            if board.move is not None:
                moves.append(board.move)
            board = board.parent
        moves.reverse()
        return moves

    # -- structural equality --------------------------------------------------

    def __eq__(self, other: object) -> bool:
        # Pieces of equal shape are interchangeable: only the per-cell
        # occupant shape is compared, never which piece sits there.
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.cols == other.cols
            and self._pattern == other._pattern
        )

    def __hash__(self) -> int:
        return hash(self._pattern)

    # -- rendering ------------------------------------------------------------

    def labels(self) -> list[list[int | None]]:
        """Per-cell 1-based piece order number, ``None`` for empty cells."""
        order = {p.identity: i for i, p in enumerate(self.pieces, 1)}
        return [
            [None if ident is None else order[ident] for ident in row]
            for row in self._grid
        ]

    def render_text(self) -> str:
        """Return a plain-text dump of the grid."""
        width = len(str(len(self.pieces))) if self.pieces else 1
        cell_w = width + 2
        sep = "+" + (("-" * cell_w + "+") * self.cols)

        lines: list[str] = [sep]
        for row in self.labels():
            cells = [
                f" {'.' if val is None else val:>{width}} " for val in row
            ]
            lines.append("|" + "|".join(cells) + "|")
            lines.append(sep)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render_text()

    def __repr__(self) -> str:
        return (
            f"Board({self.rows}x{self.cols}, pieces={list(self.pieces)!r}, "
            f"move={self.move})"
        )
