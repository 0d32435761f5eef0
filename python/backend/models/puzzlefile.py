"""Reading puzzle descriptions from disk.

A start file holds ``rows cols`` followed by one ``rowSpan colSpan row col``
group per piece. A goal file holds only piece groups and is read against the
start file's dimensions. Tokens are whitespace separated, so line breaks are
free-form.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from backend.models.board import Board
from backend.models.errors import ConfigurationError

logger = logging.getLogger(__name__)

PieceSpec = tuple[int, int, int, int]


@dataclass
class PuzzleSpec:
    rows: int
    cols: int
    pieces: list[PieceSpec] = field(default_factory=list)

    def to_board(self) -> Board:
        return Board.from_specs(self.rows, self.cols, self.pieces)


class PuzzleFile:
    """Parses start and goal descriptions into boards."""

    # -- parsing --------------------------------------------------------------

    @staticmethod
    def _ints(text: str, source: str) -> list[int]:
        values: list[int] = []
        for token in text.split():
            try:
                values.append(int(token))
            except ValueError:
                raise ConfigurationError(
                    f"{source}: expected an integer, got {token!r}."
                ) from None
        return values

    @staticmethod
    def _group(values: list[int], source: str) -> list[PieceSpec]:
        if len(values) % 4:
            raise ConfigurationError(
                f"{source}: piece descriptions need four integers each, "
                f"{len(values) % 4} left over."
            )
        return [
            (values[i], values[i + 1], values[i + 2], values[i + 3])
            for i in range(0, len(values), 4)
        ]

    @staticmethod
    def parse_start(text: str, source: str = "<start>") -> PuzzleSpec:
        values = PuzzleFile._ints(text, source)
        if len(values) < 2:
            raise ConfigurationError(f"{source}: missing grid dimensions.")
        rows, cols = values[0], values[1]
        return PuzzleSpec(rows, cols, PuzzleFile._group(values[2:], source))

    @staticmethod
    def parse_goal(
        text: str, rows: int, cols: int, source: str = "<goal>"
    ) -> PuzzleSpec:
        values = PuzzleFile._ints(text, source)
        return PuzzleSpec(rows, cols, PuzzleFile._group(values, source))

    # -- loading --------------------------------------------------------------

    @staticmethod
    def load_start(path: Path) -> Board:
        spec = PuzzleFile.parse_start(PuzzleFile._read(path), str(path))
        board = PuzzleFile._build(spec, path)
        logger.info(
            "Start board loaded from %s with hash %d:\n%s",
            path, hash(board), board,
        )
        return board

    @staticmethod
    def load_goal(path: Path, rows: int, cols: int) -> Board:
        spec = PuzzleFile.parse_goal(PuzzleFile._read(path), rows, cols, str(path))
        board = PuzzleFile._build(spec, path)
        logger.info(
            "Goal board loaded from %s with hash %d:\n%s",
            path, hash(board), board,
        )
        return board

    @staticmethod
    def _read(path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ConfigurationError(f"{path}: not a text file ({exc.reason}).") from exc

    @staticmethod
    def _build(spec: PuzzleSpec, path: Path) -> Board:
        try:
            return spec.to_board()
        except ConfigurationError as exc:
            raise ConfigurationError(f"{path}: {exc}") from exc
