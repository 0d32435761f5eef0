"""Board model tests: construction, shape equality, rendering, paths."""

from __future__ import annotations

import pytest

from backend.engine.movegenerator import MoveGenerator
from backend.models import (
    Board,
    ConfigurationError,
    Direction,
    InvariantViolation,
    Move,
)


# -- construction -------------------------------------------------------------


def test_grid_is_derived_from_pieces() -> None:
    board = Board.from_specs(3, 3, [(2, 1, 0, 0), (1, 2, 2, 1)])

    assert board.occupant_shape_at(0, 0) == (2, 1)
    assert board.occupant_shape_at(1, 0) == (2, 1)
    assert board.occupant_shape_at(2, 1) == (1, 2)
    assert board.occupant_shape_at(2, 2) == (1, 2)
    assert board.occupant_shape_at(0, 1) is None
    assert board.occupant_at(0, 0) == board.pieces[0].identity
    assert board.occupant_at(1, 1) is None
    assert board.parent is None
    assert board.move is None


@pytest.mark.parametrize(
    "specs",
    [
        [(1, 1, 2, 0)],           # below the grid
        [(1, 3, 0, 0)],           # too wide
        [(1, 1, -1, 0)],          # negative row
        [(2, 2, 0, 0), (1, 1, 1, 1)],  # overlap
    ],
    ids=["below", "too-wide", "negative", "overlap"],
)
def test_invalid_layouts_are_configuration_errors(specs: list) -> None:
    with pytest.raises(ConfigurationError):
        Board.from_specs(2, 2, specs)


@pytest.mark.parametrize("rows, cols", [(0, 2), (2, 0)])
def test_empty_grid_is_rejected(rows: int, cols: int) -> None:
    with pytest.raises(ConfigurationError):
        Board.from_specs(rows, cols, [])


def test_is_valid_rederives_from_current_positions() -> None:
    board = Board.from_specs(2, 2, [(1, 1, 0, 0), (1, 1, 1, 1)])
    assert board.is_valid()

    clone = board.copy()
    clone.pieces[0].move_to(1, 1)
    assert not clone.is_valid()
    assert board.is_valid()


def test_lookup_miss_is_an_invariant_violation() -> None:
    board = Board.from_specs(1, 2, [(1, 1, 0, 0)])
    with pytest.raises(InvariantViolation):
        board.piece((9, 9, 9, 9))

    board._index.clear()
    with pytest.raises(InvariantViolation):
        board.occupant_shape_at(0, 0)
    assert board.occupant_shape_at(0, 1) is None


def test_copy_is_equal_but_independent() -> None:
    board = Board.from_specs(2, 2, [(1, 1, 0, 0)])
    clone = board.copy()

    assert clone == board
    assert clone.pieces[0] is not board.pieces[0]
    assert clone.pieces[0].identity == board.pieces[0].identity
    clone.pieces[0].move_to(1, 1)
    assert board.pieces[0].position == (0, 0)


# -- structural equality ------------------------------------------------------


def test_equality_ignores_piece_identity() -> None:
    start = Board.from_specs(1, 2, [(1, 1, 0, 1)])
    moved = MoveGenerator.try_move(start, start.pieces[0], Direction.LEFT)
    fresh = Board.from_specs(1, 2, [(1, 1, 0, 0)])

    assert moved is not None
    assert moved.pieces[0].identity != fresh.pieces[0].identity
    assert moved == fresh
    assert hash(moved) == hash(fresh)


def test_same_shaped_pieces_are_interchangeable() -> None:
    a = Board.from_specs(2, 2, [(1, 1, 0, 0), (1, 1, 1, 1)])
    b = Board.from_specs(2, 2, [(1, 1, 1, 1), (1, 1, 0, 0)])
    assert a == b
    assert hash(a) == hash(b)


def test_equality_matches_per_cell_shapes() -> None:
    boards = [
        Board.from_specs(2, 2, [(1, 2, 0, 0)]),
        Board.from_specs(2, 2, [(1, 1, 0, 0), (1, 1, 0, 1)]),
        Board.from_specs(2, 2, [(1, 2, 1, 0)]),
        Board.from_specs(2, 2, [(2, 1, 0, 0)]),
        Board.from_specs(2, 2, [(1, 2, 0, 0)]),
    ]
    for a in boards:
        for b in boards:
            same_cells = all(
                a.occupant_shape_at(r, c) == b.occupant_shape_at(r, c)
                for r in range(2)
                for c in range(2)
            )
            assert (a == b) == same_cells
            if a == b:
                assert hash(a) == hash(b)


def test_different_dimensions_are_never_equal() -> None:
    assert Board.from_specs(1, 2, []) != Board.from_specs(2, 1, [])
    assert Board.from_specs(1, 2, []) != "not a board"


# -- rendering ----------------------------------------------------------------


def test_render_text() -> None:
    board = Board.from_specs(2, 2, [(1, 2, 0, 0), (1, 1, 1, 1)])
    assert board.render_text() == (
        "+---+---+\n"
        "| 1 | 1 |\n"
        "+---+---+\n"
        "| . | 2 |\n"
        "+---+---+"
    )
    assert str(board) == board.render_text()


# -- path reconstruction ------------------------------------------------------


def test_reconstruct_path_is_oldest_first() -> None:
    board = Board.from_specs(2, 2, [(1, 1, 0, 0)])
    for direction in (Direction.DOWN, Direction.RIGHT, Direction.UP):
        nxt = MoveGenerator.try_move(board, board.pieces[0], direction)
        assert nxt is not None
        board = nxt

    assert board.reconstruct_path() == [
        Move(0, 0, 1, 0),
        Move(1, 0, 1, 1),
        Move(1, 1, 0, 1),
    ]


def test_root_has_empty_path() -> None:
    assert Board.from_specs(1, 1, []).reconstruct_path() == []


def test_move_text_and_direction() -> None:
    move = Move(2, 3, 2, 2)
    assert str(move) == "2 3 2 2"
    assert move.direction is Direction.LEFT
    with pytest.raises(ValueError):
        Move(0, 0, 1, 1).direction
