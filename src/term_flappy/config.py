"""
config.py: Tunable game settings, defaulting to the values in constants.py.
"""

from dataclasses import dataclass

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, BIRD_X, BIRD_WIDTH, MIN_SCREEN_HEIGHT,
    GRAVITY, JUMP_VELOCITY, UPDATE_INTERVAL, MAX_VELOCITY,
    MAX_OBSTACLE_WIDTH, MIN_OBSTACLE_WIDTH, SPAWN_INTERVAL,
    LEVEL_UP_SCORE, TICK_RATE
)
from .exceptions import ConfigError


@dataclass
class GameConfig:
    """Everything a GameEngine needs to know before the first tick."""
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    bird_x: int = BIRD_X

    gravity: float = GRAVITY
    jump_velocity: float = JUMP_VELOCITY
    dt: float = UPDATE_INTERVAL
    max_velocity: float = MAX_VELOCITY

    max_obstacle_width: int = MAX_OBSTACLE_WIDTH
    spawn_interval: float = SPAWN_INTERVAL      # seconds
    level_up_score: int = LEVEL_UP_SCORE
    tick_rate: int = TICK_RATE

    @property
    def screen_size(self) -> tuple[int, int]:
        return (self.screen_width, self.screen_height)

    def validate(self) -> "GameConfig":
        """
        Rejects settings that would leave the random obstacle ranges empty
        or push the bird off screen. Returns self so calls can be chained.
        """
        if self.screen_height < MIN_SCREEN_HEIGHT:
            raise ConfigError(
                f"screen height must be at least {MIN_SCREEN_HEIGHT}, got {self.screen_height}")
        if self.max_obstacle_width <= MIN_OBSTACLE_WIDTH:
            raise ConfigError(
                f"max obstacle width must exceed {MIN_OBSTACLE_WIDTH}, got {self.max_obstacle_width}")
        if self.screen_width < self.max_obstacle_width:
            raise ConfigError(
                f"screen width {self.screen_width} is narrower than the widest obstacle "
                f"({self.max_obstacle_width})")
        if self.bird_x < 0 or self.bird_x + BIRD_WIDTH > self.screen_width:
            raise ConfigError(
                f"bird at column {self.bird_x} does not fit a screen {self.screen_width} wide")
        if self.dt <= 0 or self.spawn_interval <= 0 or self.tick_rate <= 0:
            raise ConfigError("dt, spawn interval and tick rate must be positive")
        if self.level_up_score <= 0:
            raise ConfigError("level up score must be positive")
        return self
