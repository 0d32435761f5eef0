"""Legal-move generation, one piece and one cell at a time."""

from __future__ import annotations

from collections.abc import Iterator

from backend.models.board import Board, Direction, Move
from backend.models.errors import ConfigurationError, InvariantViolation
from backend.models.piece import Piece


class MoveGenerator:
    """Stateless — all methods are static."""

    @staticmethod
    def try_move(board: Board, piece: Piece, direction: Direction) -> Board | None:
        """Slide *piece* one cell in *direction*.

        Returns the resulting board, or ``None`` if the destination leaves
        the grid or overlaps a different piece. *board* is never modified.
        """
        source = board.piece(piece.identity)
        dr, dc = direction.delta
        row, col = source.row + dr, source.col + dc

        if not MoveGenerator._is_free(board, source, row, col):
            return None

        pieces = tuple(p.copy() for p in board.pieces)
        for p in pieces:
            if p.identity == source.identity:
                p.move_to(row, col)
                break

        try:
            return Board(
                rows=board.rows,
                cols=board.cols,
                pieces=pieces,
                parent=board,
                move=Move(source.row, source.col, row, col),
            )
        except ConfigurationError as exc:
            raise InvariantViolation(
                f"Legal move of {source!r} {direction.value} produced an "
                f"invalid board: {exc}"
            ) from exc

    @staticmethod
    def expand(board: Board) -> Iterator[Board]:
        """Yield every legal successor of *board*.

        Pieces are tried in board order, each in ``Direction`` order
        (up, down, left, right).
        """
        for piece in board.pieces:
            for direction in Direction:
                successor = MoveGenerator.try_move(board, piece, direction)
                if successor is not None:
                    yield successor

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _is_free(board: Board, piece: Piece, row: int, col: int) -> bool:
        if row < 0 or col < 0:
            return False
        if row + piece.height > board.rows or col + piece.width > board.cols:
            return False
        for r in range(row, row + piece.height):
            for c in range(col, col + piece.width):
                occupant = board.occupant_at(r, c)
                if occupant is not None and occupant != piece.identity:
                    return False
        return True
