from __future__ import annotations

import pytest

from blockfall.board import GridCoord
from blockfall.errors import InvariantViolation
from blockfall.piece import ActivePiece, rotate_about
from blockfall.shapes import ShapeKind, shape_spec


def test_spawn_applies_offsets_to_origin() -> None:
    piece = ActivePiece.spawn(ShapeKind.O, GridCoord(10, 19))
    assert set(piece.cells) == {
        GridCoord(10, 19),
        GridCoord(11, 19),
        GridCoord(10, 18),
        GridCoord(11, 18),
    }
    assert piece.color == shape_spec(ShapeKind.O).color


@pytest.mark.parametrize("kind", list(ShapeKind))
def test_pivot_is_the_first_cell(kind: ShapeKind) -> None:
    piece = ActivePiece.spawn(kind, GridCoord(10, 10))
    assert piece.pivot == piece.cells[0]
    piece.move(-2, -3)
    assert piece.pivot == piece.cells[0]


def test_pivot_stays_put_while_rotating() -> None:
    piece = ActivePiece.spawn(ShapeKind.T, GridCoord(5, 10))
    assert piece.pivot == GridCoord(6, 10)
    piece.rotate()
    assert piece.pivot == GridCoord(6, 10)
    piece.move(-2, -3)
    assert piece.pivot == GridCoord(4, 7)


def test_rotation_is_counter_clockwise_about_pivot() -> None:
    piece = ActivePiece.spawn(ShapeKind.T, GridCoord(5, 10))
    piece.rotate()
    assert set(piece.cells) == {
        GridCoord(6, 9),
        GridCoord(6, 10),
        GridCoord(6, 11),
        GridCoord(7, 10),
    }
    assert piece.pivot == GridCoord(6, 10)


@pytest.mark.parametrize("kind", list(ShapeKind))
def test_four_rotations_restore_every_cell(kind: ShapeKind) -> None:
    piece = ActivePiece.spawn(kind, GridCoord(10, 10))
    original = list(piece.cells)
    for _ in range(4):
        piece.rotate()
    assert piece.cells == original


def test_square_rotation_is_a_no_op() -> None:
    piece = ActivePiece.spawn(ShapeKind.O, GridCoord(3, 3))
    assert piece.rotated_cells() == piece.cells


def test_rotate_about_snaps_to_integers() -> None:
    rotated = rotate_about([GridCoord(0, 0), GridCoord(3, 1)], GridCoord(0, 0), 3)
    assert rotated == [GridCoord(0, 0), GridCoord(1, -3)]
    assert all(isinstance(c.col, int) and isinstance(c.row, int) for c in rotated)


def test_move_translates_all_cells() -> None:
    piece = ActivePiece.spawn(ShapeKind.I, GridCoord(4, 10))
    piece.move(1, -1)
    assert piece.cells == [GridCoord(5, 8), GridCoord(5, 9), GridCoord(5, 7), GridCoord(5, 6)]


def test_piece_needs_four_distinct_cells() -> None:
    with pytest.raises(InvariantViolation):
        ActivePiece(ShapeKind.O, [GridCoord(0, 0), GridCoord(1, 0), GridCoord(0, 1)], (0, 0, 0))
    with pytest.raises(InvariantViolation):
        ActivePiece(
            ShapeKind.O,
            [GridCoord(0, 0), GridCoord(0, 0), GridCoord(1, 0), GridCoord(1, 1)],
            (0, 0, 0),
        )
