import numpy as np
import pytest

from falling_blocks.game import (
    PIECE_COLORS,
    Piece,
    PieceType,
    color_for,
    rotate_cw,
    shape_for,
)


def test_every_piece_has_four_cells_and_a_color():
    for kind in PieceType:
        assert int(shape_for(kind).sum()) == 4
        assert PIECE_COLORS[kind].startswith("#")
    assert color_for(PieceType.I) == "#FF0D72"
    assert color_for(7) == "#3877FF"


def test_unknown_piece_value_is_rejected():
    with pytest.raises(ValueError):
        shape_for(0)
    with pytest.raises(ValueError):
        color_for(9)


def test_base_shapes_are_read_only():
    with pytest.raises(ValueError):
        shape_for(PieceType.T)[0, 0] = True


def test_rotate_cw_transposes_then_reverses_rows():
    t = shape_for(PieceType.T)
    rotated = rotate_cw(t)
    expected = np.array([[1, 0], [1, 1], [1, 0]], dtype=bool)
    assert np.array_equal(rotated, expected)
    # input untouched
    assert np.array_equal(t, np.array([[0, 1, 0], [1, 1, 1]], dtype=bool))


def test_four_rotations_restore_every_shape():
    for kind in PieceType:
        shape = shape_for(kind)
        for _ in range(4):
            shape = rotate_cw(shape)
        assert np.array_equal(shape, shape_for(kind))


@pytest.mark.parametrize(
    "kind,col",
    [(PieceType.I, 3), (PieceType.O, 4), (PieceType.T, 4), (PieceType.Z, 4)],
)
def test_spawn_centers_piece_on_top_row(kind, col):
    piece = Piece.spawn(kind, 10)
    assert (piece.col, piece.row) == (col, 0)


def test_cells_are_absolute_coordinates():
    piece = Piece.spawn(PieceType.S, 10).moved(1, 2)
    assert sorted(piece.cells()) == [(5, 3), (6, 2), (6, 3), (7, 2)]
