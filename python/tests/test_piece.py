"""Piece model tests."""

from __future__ import annotations

import pytest

from backend.models import ConfigurationError, Piece


def test_identity_comes_from_original_placement() -> None:
    piece = Piece.from_spec((2, 1, 3, 4))
    assert piece.shape == (2, 1)
    assert piece.position == (3, 4)
    assert piece.identity == (2, 1, 3, 4)


def test_identity_survives_moves_and_copies() -> None:
    piece = Piece.from_spec((1, 2, 0, 0))
    original = piece.identity

    piece.move_to(1, 1)
    clone = piece.copy()
    clone.move_to(2, 2)

    assert piece.identity == original
    assert clone.identity == original
    assert piece.position == (1, 1)
    assert clone.position == (2, 2)
    assert clone.shape == piece.shape


def test_cells_cover_the_rectangle() -> None:
    piece = Piece.from_spec((2, 3, 1, 0))
    assert list(piece.cells()) == [
        (1, 0), (1, 1), (1, 2),
        (2, 0), (2, 1), (2, 2),
    ]


@pytest.mark.parametrize("shape", [(0, 1), (1, 0), (-1, 2)])
def test_non_positive_spans_are_rejected(shape: tuple[int, int]) -> None:
    with pytest.raises(ConfigurationError):
        Piece(shape=shape, row=0, col=0)
