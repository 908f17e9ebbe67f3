"""Game module for falling_blocks.

Exports the simulation engine and supporting classes:
- GameGrid: Fixed 20x10 board, legality check and line clearing
- Piece: Falling tetromino with runtime rotation
- PieceType: Enum of the seven piece types
- ScoringRules: Line-clear table, level and fall-speed progression
- FallingBlockGame: Engine state machine and player intents
"""

from .grid import COLS, ROWS, GameGrid
from .pieces import EMPTY, PIECE_COLORS, Piece, PieceType, color_for, rotate_cw, shape_for
from .rules import ScoringRules
from .core import Action, FallingBlockGame, GameConfig, GameStatus

__all__ = [
    "COLS",
    "ROWS",
    "EMPTY",
    "PIECE_COLORS",
    "GameGrid",
    "Piece",
    "PieceType",
    "color_for",
    "rotate_cw",
    "shape_for",
    "ScoringRules",
    "FallingBlockGame",
    "GameConfig",
    "GameStatus",
    "Action",
]
