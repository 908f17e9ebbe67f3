from __future__ import annotations

from typing import Optional

import numpy as np

from .pieces import EMPTY, PieceType, Shape


ROWS = 20
COLS = 10


class GameGrid:
    """Fixed 20x10 well that landed pieces are merged into.

    Cells hold ``EMPTY`` (0) or the ``PieceType`` value of the piece that
    filled them. Row 0 is the top of the board.
    """

    def __init__(self) -> None:
        self.width = COLS
        self.height = ROWS
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(EMPTY)

    def cell(self, col: int, row: int) -> Optional[PieceType]:
        value = int(self.grid[row, col])
        if value == EMPTY:
            return None
        return PieceType(value)

    def is_empty(self) -> bool:
        return not np.any(self.grid != EMPTY)

    def is_legal(self, shape: Shape, col: int, row: int) -> bool:
        """Whether ``shape`` anchored at (col, row) fits in the well.

        Cells above the top edge (negative rows) are never checked against
        board contents, so a piece may straddle the top while spawning.
        """
        for dy, dx in zip(*np.nonzero(shape)):
            x = col + int(dx)
            y = row + int(dy)
            if x < 0 or x >= self.width or y >= self.height:
                return False
            if y >= 0 and self.grid[y, x] != EMPTY:
                return False
        return True

    def merge(self, shape: Shape, col: int, row: int, kind: int) -> int:
        """Write ``kind`` into every occupied cell; return the cells written."""
        written = 0
        for dy, dx in zip(*np.nonzero(shape)):
            x = col + int(dx)
            y = row + int(dy)
            if 0 <= y < self.height and 0 <= x < self.width:
                self.grid[y, x] = int(kind)
                written += 1
        return written

    def clear_full_lines(self) -> int:
        cleared = 0
        row = self.height - 1
        while row >= 0:
            if np.all(self.grid[row] != EMPTY):
                # Shift everything above down one row, then blank the top row
                self.grid[1 : row + 1] = self.grid[0:row].copy()
                self.grid[0].fill(EMPTY)
                cleared += 1
                # Same index again: the row above now sits here
                continue
            row -= 1
        return cleared

    def get_max_height(self) -> int:
        # y=0 is top; find first non-empty from top
        non_empty_rows = np.where(np.any(self.grid != EMPTY, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        top_index = int(non_empty_rows[0])
        return self.height - top_index

    def count_holes(self) -> int:
        holes = 0
        for x in range(self.width):
            column = self.grid[:, x]
            seen_block = False
            for cell in column:
                if cell != EMPTY:
                    seen_block = True
                elif seen_block:
                    holes += 1
        return holes

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
