from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterator, Tuple

import numpy as np


class PieceType(IntEnum):
    I = 1
    O = 2
    T = 3
    J = 4
    L = 5
    S = 6
    Z = 7


# Board value for a cell no piece has been merged into
EMPTY = 0

Shape = np.ndarray


def _frozen(rows) -> Shape:
    shape = np.array(rows, dtype=np.bool_)
    shape.flags.writeable = False
    return shape


BASE_SHAPES: Dict[PieceType, Shape] = {
    PieceType.I: _frozen([[1, 1, 1, 1]]),
    PieceType.O: _frozen([[1, 1], [1, 1]]),
    PieceType.T: _frozen([[0, 1, 0], [1, 1, 1]]),
    PieceType.J: _frozen([[1, 0, 0], [1, 1, 1]]),
    PieceType.L: _frozen([[0, 0, 1], [1, 1, 1]]),
    PieceType.S: _frozen([[0, 1, 1], [1, 1, 0]]),
    PieceType.Z: _frozen([[1, 1, 0], [0, 1, 1]]),
}

PIECE_COLORS: Dict[PieceType, str] = {
    PieceType.I: "#FF0D72",
    PieceType.O: "#0DC2FF",
    PieceType.T: "#0DFF72",
    PieceType.J: "#F538FF",
    PieceType.L: "#FF8E0D",
    PieceType.S: "#FFE138",
    PieceType.Z: "#3877FF",
}


def shape_for(kind: int) -> Shape:
    """Spawn-orientation shape of a piece type."""
    return BASE_SHAPES[PieceType(kind)]


def color_for(kind: int) -> str:
    return PIECE_COLORS[PieceType(kind)]


def rotate_cw(shape: Shape) -> Shape:
    """Quarter turn clockwise: transpose, then reverse every row."""
    rotated = np.ascontiguousarray(shape.T[:, ::-1])
    rotated.flags.writeable = False
    return rotated


@dataclass(frozen=True, eq=False)
class Piece:
    """The falling piece: a shape anchored by its top-left corner."""

    kind: PieceType
    shape: Shape
    col: int = 0
    row: int = 0

    @classmethod
    def spawn(cls, kind: PieceType, board_width: int) -> "Piece":
        shape = shape_for(kind)
        col = board_width // 2 - shape.shape[1] // 2
        return cls(kind=PieceType(kind), shape=shape, col=col, row=0)

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])

    def moved(self, dcol: int, drow: int) -> "Piece":
        return Piece(self.kind, self.shape, self.col + dcol, self.row + drow)

    def rotated(self) -> "Piece":
        return Piece(self.kind, rotate_cw(self.shape), self.col, self.row)

    def cells(self) -> Iterator[Tuple[int, int]]:
        for dy, dx in zip(*np.nonzero(self.shape)):
            yield self.col + int(dx), self.row + int(dy)
