from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import (
    COLS,
    PIECE_COLORS,
    ROWS,
    Action,
    FallingBlockGame,
    GameConfig,
    PieceType,
)


logger = logging.getLogger(__name__)


def _rgb(hex_color: str) -> Tuple[int, int, int]:
    value = hex_color.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


_PALETTE = {int(kind): _rgb(color) for kind, color in PIECE_COLORS.items()}


class FallingBlocksEnv(gym.Env):
    """One engine intent per step, followed by a fixed slice of game time.

    Observation is the board with the falling piece overlaid as negative
    piece values; reward is the engine score gained plus optional shaping.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, render_mode: Optional[str] = None,
                 frame_ms: float = 1000.0 / 30.0,
                 max_episode_steps: int = 10000,
                 reward_weights: Optional[Dict[str, float]] = None,
                 terminal_penalty: float = 0.0) -> None:
        super().__init__()
        self.game = FallingBlockGame()
        self.render_mode = render_mode
        self.frame_ms = float(frame_ms)
        self.max_episode_steps = int(max_episode_steps)
        self.terminal_penalty = float(terminal_penalty)
        self.reward_weights: Dict[str, float] = {
            "score": 1.0,   # engine score gained
            "lines": 0.0,   # per line cleared
            "holes": 0.0,   # penalize holes created
            "height": 0.0,  # penalize max height increase
        }
        if reward_weights:
            self.reward_weights.update({k: float(v) for k, v in reward_weights.items()})

        n = len(PieceType)
        self.observation_space = spaces.Box(low=-n, high=n, shape=(ROWS, COLS), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.game.get_state().astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "level": self.game.level,
            "lines_cleared_total": self.game.lines_cleared_total,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game = FallingBlockGame(GameConfig(random_seed=seed))
        self.game.start()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        score_before = self.game.score
        lines_before = self.game.lines_cleared_total
        holes_before = self.game.grid.count_holes()
        height_before = self.game.grid.get_max_height()

        self.game.step(Action(int(action)))
        self.game.advance(self.frame_ms)
        self._steps += 1

        reward_components: Dict[str, float] = {
            "score": self.reward_weights["score"] * float(self.game.score - score_before),
            "lines": self.reward_weights["lines"] * float(self.game.lines_cleared_total - lines_before),
            "holes": -self.reward_weights["holes"] * float(
                max(0, self.game.grid.count_holes() - holes_before)),
            "height": -self.reward_weights["height"] * float(
                max(0, self.game.grid.get_max_height() - height_before)),
        }

        terminated = bool(self.game.game_over)
        truncated = not terminated and self._steps >= self.max_episode_steps
        if terminated:
            reward_components["terminal"] = self.terminal_penalty
            logger.debug("Episode finished after %d steps: %s", self._steps, self.game.get_game_stats())

        info = self._get_info()
        info["reward_components"] = reward_components
        return self._get_obs(), float(sum(reward_components.values())), terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        state = self.game.get_state()
        cell = 12
        h, w = state.shape
        img = np.full((h * cell, w * cell, 3), 26, dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                v = abs(int(state[y, x]))
                if v:
                    img[y * cell + 1 : (y + 1) * cell - 1, x * cell + 1 : (x + 1) * cell - 1, :] = _PALETTE[v]
        return img

    def close(self) -> None:
        pass
