from __future__ import annotations

import itertools
from typing import Iterable

import pytest

from falling_blocks.game import FallingBlockGame, GameConfig, PieceType


def rigged_game(kinds: Iterable[PieceType], fallback: PieceType = PieceType.O) -> FallingBlockGame:
    """Engine whose spawns follow ``kinds``, then repeat ``fallback``."""
    game = FallingBlockGame(GameConfig(random_seed=0))
    upcoming = itertools.chain(kinds, itertools.repeat(fallback))
    game._random_kind = lambda: next(upcoming)
    return game


@pytest.fixture
def make_game():
    return rigged_game
