from __future__ import annotations

from typing import Tuple

import numpy as np
import pygame

from falling_blocks.game import FallingBlockGame, color_for


BACKGROUND = (26, 26, 26)
GRID_LINE = (51, 51, 51)
PANEL_TEXT = (230, 230, 230)


def _color_for_value(v: int) -> pygame.Color:
    # Negative values are the falling piece overlay
    return pygame.Color(color_for(abs(v)))


class Renderer:
    def __init__(self, cell_size: int = 24, margin: int = 20, panel_width: int = 160) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width
        self._font: pygame.font.Font | None = None

    def window_size(self, game: FallingBlockGame) -> Tuple[int, int]:
        w = game.grid.width * self.cell_size + self.margin * 3 + self.panel_width
        h = game.grid.height * self.cell_size + self.margin * 2
        return w, h

    def _font_obj(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        return self._font

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        size = self.cell_size
        surf = pygame.Surface((w * size, h * size))
        surf.fill(BACKGROUND)
        for row in range(h + 1):
            pygame.draw.line(surf, GRID_LINE, (0, row * size), (w * size, row * size))
        for col in range(w + 1):
            pygame.draw.line(surf, GRID_LINE, (col * size, 0), (col * size, h * size))
        highlight = pygame.Surface((size - 2, size // 2), pygame.SRCALPHA)
        highlight.fill((255, 255, 255, 76))
        for y in range(h):
            for x in range(w):
                v = int(state[y, x])
                if v == 0:
                    continue
                rect = pygame.Rect(x * size + 1, y * size + 1, size - 2, size - 2)
                pygame.draw.rect(surf, _color_for_value(v), rect)
                surf.blit(highlight, rect.topleft)
        return surf

    def _draw_panel(self, screen: pygame.Surface, game: FallingBlockGame) -> None:
        font = self._font_obj()
        left = self.margin * 2 + game.grid.width * self.cell_size
        lines = [
            f"Score: {game.score}",
            f"Level: {game.level}",
            f"Lines: {game.lines_cleared_total}",
        ]
        for i, text in enumerate(lines):
            screen.blit(font.render(text, True, PANEL_TEXT), (left, self.margin + i * 32))

    def _draw_overlay(self, screen: pygame.Surface, title: str, message: str) -> None:
        shade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 170))
        screen.blit(shade, (0, 0))
        font = self._font_obj()
        cx, cy = screen.get_width() // 2, screen.get_height() // 2
        for offset, text in ((-20, title), (20, message)):
            surf = font.render(text, True, PANEL_TEXT)
            screen.blit(surf, surf.get_rect(center=(cx, cy + offset)))

    def draw(self, screen: pygame.Surface, game: FallingBlockGame) -> None:
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(game.get_state()), (self.margin, self.margin))
        self._draw_panel(screen, game)
        if game.game_over:
            stats = game.get_game_stats()
            self._draw_overlay(
                screen,
                "Game Over",
                f"Score: {stats['score']} | Level: {stats['level']} | Lines: {stats['lines_cleared']}",
            )
        elif game.paused:
            self._draw_overlay(screen, "Paused", "Press P to resume")
        elif game.active_piece is None:
            self._draw_overlay(screen, "Falling Blocks", "Press Enter to start")
        pygame.display.flip()
