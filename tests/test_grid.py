import numpy as np

from falling_blocks.game import COLS, ROWS, GameGrid, PieceType, rotate_cw, shape_for


I = shape_for(PieceType.I)
O = shape_for(PieceType.O)


def test_new_grid_is_empty_and_fixed_size():
    grid = GameGrid()
    assert grid.grid.shape == (ROWS, COLS) == (20, 10)
    assert grid.is_empty()
    assert grid.cell(0, 0) is None


def test_legality_respects_walls_and_floor():
    grid = GameGrid()
    assert grid.is_legal(I, 0, 0)
    assert grid.is_legal(I, 6, 0)
    assert not grid.is_legal(I, -1, 0)
    assert not grid.is_legal(I, 7, 0)
    assert grid.is_legal(O, 0, 18)
    assert not grid.is_legal(O, 0, 19)


def test_rows_above_the_board_are_not_checked():
    grid = GameGrid()
    grid.grid[0, 4] = PieceType.Z
    vertical_i = rotate_cw(I)
    assert grid.is_legal(vertical_i, 5, -3)
    assert grid.is_legal(O, 4, -2)
    assert not grid.is_legal(O, 4, -1)


def test_merge_skips_cells_above_the_board():
    grid = GameGrid()
    written = grid.merge(O, 4, -1, PieceType.O)
    assert written == 2
    assert grid.cell(4, 0) is PieceType.O
    assert grid.cell(5, 0) is PieceType.O
    assert int(np.count_nonzero(grid.grid)) == 2


def test_clear_full_lines_shifts_rows_down():
    grid = GameGrid()
    grid.grid[19, :] = PieceType.I
    grid.grid[17, :] = PieceType.J
    grid.grid[18, 0] = PieceType.T
    grid.grid[16, 9] = PieceType.L

    assert grid.clear_full_lines() == 2
    assert grid.cell(0, 19) is PieceType.T
    assert grid.cell(9, 18) is PieceType.L
    assert int(np.count_nonzero(grid.grid)) == 2
    assert not grid.grid[:18].any()


def test_adjacent_full_rows_are_all_cleared():
    grid = GameGrid()
    grid.grid[16:20, :] = PieceType.S
    grid.grid[15, 3] = PieceType.Z
    assert grid.clear_full_lines() == 4
    assert grid.cell(3, 19) is PieceType.Z
    assert grid.clear_full_lines() == 0


def test_board_features():
    grid = GameGrid()
    assert grid.get_max_height() == 0
    grid.grid[15, 2] = PieceType.O
    grid.grid[19, 2] = PieceType.O
    assert grid.get_max_height() == 5
    assert grid.count_holes() == 3
    grid.reset()
    assert grid.is_empty()
