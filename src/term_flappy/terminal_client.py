"""
terminal_client.py

curses front end. Controls:
  space / up : jump
  r          : restart after a crash
  q / Esc    : quit
"""

import curses
import logging
import random
import time
from dataclasses import replace
from typing import Dict, Optional

from .config import GameConfig
from .data_models import Cell
from .game_engine import GameEngine

logger = logging.getLogger(__name__)

ESCAPE = 27
CURSES_COLORS = {
    "blue": curses.COLOR_BLUE,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
}


class TerminalClient:
    def __init__(self, stdscr, engine: GameEngine):
        self.stdscr = stdscr
        self.engine = engine
        self._pairs: Dict[str, int] = {}

        curses.curs_set(0)
        stdscr.nodelay(True)
        stdscr.keypad(True)
        if curses.has_colors():
            curses.start_color()
            for number, (name, color) in enumerate(CURSES_COLORS.items(), start=1):
                curses.init_pair(number, color, curses.COLOR_BLACK)
                self._pairs[name] = number

    def run(self):
        frame_time = 1.0 / self.engine.config.tick_rate
        logger.info("Terminal client started, %.3fs per frame", frame_time)

        while True:
            key = self.stdscr.getch()
            if key in (ord("q"), ESCAPE):
                break
            if key in (ord(" "), curses.KEY_UP):
                self.engine.jump()
            elif key == ord("r") and self.engine.is_game_over():
                self.engine.restart()

            self.engine.update()
            self.draw()
            time.sleep(frame_time)

        logger.info("Terminal client stopped")

    def _attr(self, color: str) -> int:
        pair = self._pairs.get(color)
        return curses.color_pair(pair) if pair else curses.A_NORMAL

    def _put(self, cell: Cell):
        x, y, char, color = cell
        columns, rows = self.engine.config.screen_size
        if 0 <= x < columns and 0 <= y < rows:
            self.stdscr.addstr(y, x, char, self._attr(color))

    def _text(self, row: int, column: int, text: str, attr: Optional[int] = None):
        columns = self.engine.config.screen_width
        self.stdscr.addstr(row, max(0, column), text[:columns], attr or curses.A_NORMAL)

    def draw(self):
        engine = self.engine
        self.stdscr.erase()

        for obstacle in engine.obstacles:
            for cell in obstacle.draw():
                self._put(cell)
        for cell in engine.bird.draw():
            self._put(cell)

        self._text(0, 1, f"Score: {engine.score}  Level: {engine.level}  Best: {engine.best_score}")

        if engine.is_game_over():
            columns, rows = engine.config.screen_size
            for offset, line in enumerate(("GAME OVER", "Press r to restart or q to quit")):
                self._text(rows // 2 - 1 + offset, (columns - len(line)) // 2, line, curses.A_BOLD)

        self.stdscr.refresh()


def _play(stdscr, config: GameConfig, rng: random.Random):
    rows, columns = stdscr.getmaxyx()
    # The last column is left empty; curses cannot write the bottom-right cell
    config = replace(config, screen_width=columns - 1, screen_height=rows)
    engine = GameEngine(config=config, rng=rng)
    TerminalClient(stdscr, engine).run()


def run_terminal(config: GameConfig, rng: Optional[random.Random] = None):
    """Plays in the current terminal, sized to fit it."""
    curses.wrapper(_play, config, rng or random.Random())
