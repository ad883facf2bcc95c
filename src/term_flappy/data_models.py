"""
data_models.py: Data structures for the game state.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .constants import (
    BIRD_X, BIRD_WIDTH, BIRD_HEIGHT, BIRD_SHAPE, BIRD_COLOR, CEILING_Y,
    FLOOR_OFFSET, MIN_OBSTACLE_WIDTH, MIN_OBSTACLE_HEIGHT,
    OBSTACLE_HEIGHT_MARGIN, OBSTACLE_COLORS, OBSTACLE_CHAR
)
from .exceptions import ConfigError
from .physics_core import PhysicsCore

# (column, row, character, color name)
Cell = Tuple[int, int, str, str]


@dataclass
class Bird:
    """The player controlled entity. Only its row ever changes."""
    screen_size: Tuple[int, int]
    x: int = BIRD_X
    physics: PhysicsCore = field(default_factory=PhysicsCore)
    y: float = field(init=False)
    velocity: float = field(init=False)

    def __post_init__(self):
        self.reset()

    def reset(self):
        """Back to mid-screen, at rest."""
        self.y = float(self.screen_size[1] // 2)
        self.velocity = 0.0

    @property
    def ceiling_y(self) -> int:
        return CEILING_Y

    @property
    def floor_y(self) -> int:
        return self.screen_size[1] - FLOOR_OFFSET

    def update(self):
        """Advances the bird by one tick of gravity."""
        self.y, self.velocity = self.physics.apply_gravity_and_movement(
            self.y, self.velocity, self.ceiling_y, self.floor_y)

    def jump(self):
        """Overwrites the current velocity with the jump impulse."""
        self.velocity = self.physics.flap()

    @property
    def leftmost_x(self) -> int:
        return self.x

    @property
    def rightmost_x(self) -> int:
        return self.x + BIRD_WIDTH - 1

    @property
    def bottom_y(self) -> float:
        return self.y + BIRD_HEIGHT - 1

    def draw(self) -> List[Cell]:
        """Cells covered by the bird's shape, for whichever front end draws them."""
        row = int(self.y)
        return [(self.x + dx, row + dy, char, BIRD_COLOR) for dx, dy, char in BIRD_SHAPE]


@dataclass
class Obstacle:
    """A block standing on the floor of the screen, scrolling leftward."""
    x: int
    width: int
    height: int
    color: str
    screen_size: Tuple[int, int]

    @classmethod
    def random(cls, max_width: int, screen_size: Tuple[int, int],
               rng: Optional[random.Random] = None) -> "Obstacle":
        """
        Creates an obstacle flush against the right edge of the screen.

        Widths come from [2, max_width) and heights from
        [3, screen_height - 10); both upper bounds are exclusive.
        """
        screen_width, screen_height = screen_size
        if max_width <= MIN_OBSTACLE_WIDTH:
            raise ConfigError(f"max_width must exceed {MIN_OBSTACLE_WIDTH}, got {max_width}")
        if screen_height - OBSTACLE_HEIGHT_MARGIN <= MIN_OBSTACLE_HEIGHT:
            raise ConfigError(f"screen height {screen_height} is too small for obstacles")

        rng = rng or random
        width = rng.randrange(MIN_OBSTACLE_WIDTH, max_width)
        height = rng.randrange(MIN_OBSTACLE_HEIGHT, screen_height - OBSTACLE_HEIGHT_MARGIN)
        color = rng.choice(OBSTACLE_COLORS)

        return cls(x=screen_width - width, width=width, height=height,
                   color=color, screen_size=screen_size)

    def scroll(self):
        """Moves one column left, never past column 0."""
        self.x = max(self.x - 1, 0)

    @property
    def leftmost_x(self) -> int:
        return self.x

    @property
    def rightmost_x(self) -> int:
        return self.x + self.width - 1

    @property
    def top_y(self) -> int:
        return self.screen_size[1] - self.height

    def draw(self) -> List[Cell]:
        return [
            (x, y, OBSTACLE_CHAR, self.color)
            for y in range(self.top_y, self.screen_size[1])
            for x in range(self.x, self.x + self.width)
        ]


class GameStatus(Enum):
    START = "start"
    RUNNING = "running"
    END = "end"


@dataclass
class GameSession:
    """Status, score and level of one play session."""
    status: GameStatus = GameStatus.START
    score: int = 0
    level: int = 1
    best_score: int = 0     # Best of this process, never persisted

    def is_running(self) -> bool:
        return self.status is GameStatus.RUNNING

    def start(self):
        self.status = GameStatus.RUNNING
        self.score = 0
        self.level = 1

    def end(self):
        self.status = GameStatus.END
        self.best_score = max(self.best_score, self.score)

    def increase_score(self):
        self.score += 1

    def increase_level(self):
        self.level += 1
