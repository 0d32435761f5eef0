"""Rectangular piece model."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from backend.models.errors import ConfigurationError

Shape = tuple[int, int]
Identity = tuple[int, int, int, int]


@dataclass(eq=False)
class Piece:
    """A rectangle of ``shape`` (row-span, col-span) with its top-left at
    (``row``, ``col``).

    ``identity`` is fixed from the shape and the position the piece was
    created at; copies and moves keep it.
    """

    shape: Shape
    row: int
    col: int
    identity: Identity | None = None

    def __post_init__(self) -> None:
        height, width = self.shape
        if height < 1 or width < 1:
            raise ConfigurationError(
                f"Piece spans must be positive, got {height}x{width}."
            )
        self.shape = (height, width)
        if self.identity is None:
            self.identity = (height, width, self.row, self.col)

    @classmethod
    def from_spec(cls, spec: tuple[int, int, int, int]) -> Piece:
        """Create a piece from a ``(rowSpan, colSpan, row, col)`` tuple."""
        height, width, row, col = spec
        return cls(shape=(height, width), row=row, col=col)

    # -- queries --------------------------------------------------------------

    @property
    def height(self) -> int:
        return self.shape[0]

    @property
    def width(self) -> int:
        return self.shape[1]

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield every (row, col) the piece covers."""
        for r in range(self.row, self.row + self.height):
            for c in range(self.col, self.col + self.width):
                yield r, c

    # -- mutation -------------------------------------------------------------

    def move_to(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    def copy(self) -> Piece:
        return Piece(
            shape=self.shape,
            row=self.row,
            col=self.col,
            identity=self.identity,
        )

    def __repr__(self) -> str:
        return (
            f"Piece({self.height}x{self.width} at {self.row},{self.col})"
        )
