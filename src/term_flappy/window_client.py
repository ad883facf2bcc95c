#!/usr/bin/env python3
"""
window_client.py

pygame front end drawing the game's character-cell grid in a window.
"""

import logging
from typing import Dict, Optional, Tuple

import pygame

from .constants import CELL_SIZE
from .data_models import Cell
from .game_engine import GameEngine

logger = logging.getLogger(__name__)

BACKGROUND = (0, 0, 0)
HUD_COLOR = (200, 200, 200)
GAME_OVER_COLOR = (255, 50, 50)
PALETTE: Dict[str, Tuple[int, int, int]] = {
    "blue": (60, 90, 255),
    "green": (0, 200, 0),
    "yellow": (255, 220, 0),
    "magenta": (220, 0, 220),
    "cyan": (0, 220, 220),
}


class WindowClient:
    def __init__(self, engine: GameEngine, cell_size: int = CELL_SIZE):
        pygame.init()
        self.engine = engine
        self.cell_size = cell_size

        columns, rows = engine.config.screen_size
        self.screen = pygame.display.set_mode((columns * cell_size, rows * cell_size))
        pygame.display.set_caption("term-flappy")

        self.font = pygame.font.Font(None, cell_size + 4)
        self.clock = pygame.time.Clock()
        self._glyphs: Dict[Tuple[str, str], pygame.Surface] = {}

    def run(self):
        """The main client execution loop."""
        logger.info("Window client started at %d fps", self.engine.config.tick_rate)
        running = True
        while running:
            self.clock.tick(self.engine.config.tick_rate)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self._handle_key(event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    self.engine.jump()

            self.engine.update()
            self._draw_game()

        pygame.quit()
        logger.info("Window client stopped")

    def _handle_key(self, key: int) -> bool:
        """Returns False when the key asks to quit."""
        if key in (pygame.K_ESCAPE, pygame.K_q):
            return False
        if key in (pygame.K_SPACE, pygame.K_UP):
            self.engine.jump()
        elif key == pygame.K_r and self.engine.is_game_over():
            self.engine.restart()
        return True

    def _glyph(self, char: str, color: str) -> pygame.Surface:
        key = (char, color)
        if key not in self._glyphs:
            self._glyphs[key] = self.font.render(char, True, PALETTE.get(color, HUD_COLOR))
        return self._glyphs[key]

    def _put(self, cell: Cell):
        x, y, char, color = cell
        self.screen.blit(self._glyph(char, color), (x * self.cell_size, y * self.cell_size))

    def _text(self, column: int, row: int, text: str,
              color: Optional[Tuple[int, int, int]] = None):
        surface = self.font.render(text, True, color or HUD_COLOR)
        self.screen.blit(surface, (column * self.cell_size, row * self.cell_size))

    def _draw_game(self):
        """Renders the game state using pygame."""
        engine = self.engine
        self.screen.fill(BACKGROUND)

        for obstacle in engine.obstacles:
            for cell in obstacle.draw():
                self._put(cell)
        for cell in engine.bird.draw():
            self._put(cell)

        self._text(0, 0, f"Score: {engine.score}  Level: {engine.level}  Best: {engine.best_score}")

        if engine.is_game_over():
            columns, rows = engine.config.screen_size
            message = "Game over - R to restart, Esc to quit"
            self._text(max(0, (columns - len(message)) // 2), rows // 2, message, GAME_OVER_COLOR)

        pygame.display.flip()
