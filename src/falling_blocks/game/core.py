from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

import numpy as np

from .grid import GameGrid
from .pieces import Piece, PieceType
from .rules import ScoringRules


logger = logging.getLogger(__name__)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    NONE = 5


class GameStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    random_seed: Optional[int] = None


class FallingBlockGame:
    """Game-state simulation for one falling-block game.

    The engine is passive: a driver calls :meth:`advance` once per frame with
    the elapsed milliseconds and forwards player intents in between. Intents
    that would leave the piece out of bounds or overlapping the board are
    dropped without error, and every intent is ignored unless the game is
    running.
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = random.Random(self.config.random_seed)
        self.grid = GameGrid()
        self.status = GameStatus.IDLE
        self.active_piece: Optional[Piece] = None
        self._reset_progress()

    def _reset_progress(self) -> None:
        self.score = 0
        self.level = 1
        self.lines_cleared_total = 0
        self.pieces_placed = 0
        self.fall_interval = self.rules.fall_interval_for_level(1)
        self.drop_counter = 0.0

    # ---------- Lifecycle ----------
    def start(self) -> None:
        """Begin a new game, discarding whatever state the previous one left."""
        self.grid.reset()
        self._reset_progress()
        self.active_piece = None
        self.status = GameStatus.RUNNING
        logger.info("Game started")
        self._spawn_piece()

    def pause(self) -> None:
        if self.status is GameStatus.RUNNING:
            self.status = GameStatus.PAUSED

    def resume(self) -> None:
        if self.status is GameStatus.PAUSED:
            self.status = GameStatus.RUNNING

    @property
    def running(self) -> bool:
        return self.status is GameStatus.RUNNING

    @property
    def paused(self) -> bool:
        return self.status is GameStatus.PAUSED

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    @property
    def board(self) -> np.ndarray:
        return self.grid.clone_state()

    # ---------- Spawning ----------
    def _random_kind(self) -> PieceType:
        return self.rng.choice(list(PieceType))

    def _spawn_piece(self) -> None:
        piece = Piece.spawn(self._random_kind(), self.grid.width)
        if not self.grid.is_legal(piece.shape, piece.col, piece.row):
            self.active_piece = None
            self.status = GameStatus.GAME_OVER
            logger.info(
                "Game over: score=%d level=%d lines=%d",
                self.score,
                self.level,
                self.lines_cleared_total,
            )
            return
        self.active_piece = piece

    # ---------- Intents ----------
    def _fits(self, piece: Piece) -> bool:
        return self.grid.is_legal(piece.shape, piece.col, piece.row)

    def move(self, direction: int) -> None:
        if not self.running or self.active_piece is None:
            return
        step = int(np.sign(direction))
        if step == 0:
            return
        candidate = self.active_piece.moved(step, 0)
        if self._fits(candidate):
            self.active_piece = candidate

    def rotate(self) -> None:
        if not self.running or self.active_piece is None:
            return
        candidate = self.active_piece.rotated()
        if self._fits(candidate):
            self.active_piece = candidate

    def soft_drop(self) -> None:
        if not self.running or self.active_piece is None:
            return
        candidate = self.active_piece.moved(0, 1)
        if self._fits(candidate):
            self.active_piece = candidate
        else:
            self._land()
        self.drop_counter = 0.0

    def hard_drop(self) -> None:
        if not self.running or self.active_piece is None:
            return
        piece = self.active_piece
        while self._fits(piece.moved(0, 1)):
            piece = piece.moved(0, 1)
        self.active_piece = piece
        self._land()
        self.drop_counter = 0.0

    def advance(self, delta_ms: float) -> None:
        """Accumulate frame time and let the piece fall one row once it is due."""
        if not self.running:
            return
        self.drop_counter += max(0.0, float(delta_ms))
        if self.drop_counter > self.fall_interval:
            self.soft_drop()

    def step(self, action: Action) -> None:
        action = Action(action)
        if action == Action.LEFT:
            self.move(-1)
        elif action == Action.RIGHT:
            self.move(1)
        elif action == Action.ROTATE:
            self.rotate()
        elif action == Action.SOFT_DROP:
            self.soft_drop()
        elif action == Action.HARD_DROP:
            self.hard_drop()
        elif action == Action.NONE:
            pass

    # ---------- Landing ----------
    def _land(self) -> None:
        piece = self.active_piece
        assert piece is not None
        self.grid.merge(piece.shape, piece.col, piece.row, piece.kind)
        self.pieces_placed += 1
        self.active_piece = None
        self._clear_lines()
        self._spawn_piece()

    def _clear_lines(self) -> int:
        lines = self.grid.clear_full_lines()
        if lines == 0:
            return 0
        self.score += self.rules.score_for_lines(lines, self.level)
        self.lines_cleared_total += lines
        self.level = self.rules.level_for_lines(self.lines_cleared_total)
        self.fall_interval = self.rules.fall_interval_for_level(self.level)
        logger.debug("Cleared %d line(s); score=%d level=%d", lines, self.score, self.level)
        return lines

    # ---------- Read-side helpers ----------
    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for rendering
        state = self.grid.clone_state()
        if self.active_piece is not None:
            for x, y in self.active_piece.cells():
                if 0 <= y < self.grid.height and 0 <= x < self.grid.width:
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -int(self.active_piece.kind)
        return state

    def get_game_stats(self) -> dict:
        return {
            "score": self.score,
            "level": self.level,
            "lines_cleared": self.lines_cleared_total,
            "pieces_placed": self.pieces_placed,
            "status": self.status.value,
        }
