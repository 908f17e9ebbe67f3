import pygame

from falling_blocks.game import GameStatus, PieceType
from falling_blocks.visualization.human_play import handle_key


def test_keys_drive_the_engine(make_game):
    game = make_game([PieceType.T])
    handle_key(game, pygame.K_LEFT)
    assert game.status is GameStatus.IDLE

    handle_key(game, pygame.K_RETURN)
    assert game.running
    handle_key(game, pygame.K_LEFT)
    assert game.active_piece.col == 3

    handle_key(game, pygame.K_p)
    assert game.paused
    handle_key(game, pygame.K_RETURN)
    handle_key(game, pygame.K_RIGHT)
    assert game.paused
    assert game.active_piece.col == 3
    handle_key(game, pygame.K_p)
    assert game.running

    handle_key(game, pygame.K_SPACE)
    assert game.pieces_placed == 1
    handle_key(game, pygame.K_r)
    assert game.pieces_placed == 0
    assert game.grid.is_empty()
