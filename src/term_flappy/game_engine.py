"""
game_engine.py: The single-player world simulation driven once per frame.
"""

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable, List

from .config import GameConfig
from .data_models import Bird, Obstacle, GameSession
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class GameEngine:
    """
    Owns the bird, the obstacles and the session, and advances them one
    tick per update() call.

    Spawning is timed with the injected monotonic clock, so irregular frame
    rates change how many ticks pass between obstacles but not how much
    wall-clock time does.
    """
    config: GameConfig = field(default_factory=GameConfig)
    clock: Callable[[], float] = time.monotonic
    rng: random.Random = field(default_factory=random.Random)

    physics: PhysicsCore = field(init=False)
    bird: Bird = field(init=False)
    obstacles: List[Obstacle] = field(default_factory=list, init=False)
    session: GameSession = field(default_factory=GameSession, init=False)
    game_over: bool = field(default=False, init=False)
    last_spawn_time: float = field(default=0.0, init=False)
    tick_count: int = field(default=0, init=False)

    def __post_init__(self):
        self.config.validate()
        self.physics = PhysicsCore(
            gravity=self.config.gravity,
            jump_velocity=self.config.jump_velocity,
            dt=self.config.dt,
            max_velocity=self.config.max_velocity,
        )
        self.bird = Bird(self.config.screen_size, x=self.config.bird_x, physics=self.physics)
        self.last_spawn_time = self.clock()
        self.session.start()
        logger.debug("Engine ready for a %dx%d screen", *self.config.screen_size)

    def update(self) -> bool:
        """
        Advances the world by one tick. Returns True once the game is over.
        """
        if self.game_over:
            return True

        self.tick_count += 1

        # 1. Drop obstacles that scrolled off, then move the rest
        remaining = [o for o in self.obstacles if o.x > 0]
        if len(remaining) != len(self.obstacles):
            logger.debug("Removed %d obstacle(s) at tick %d",
                         len(self.obstacles) - len(remaining), self.tick_count)
        self.obstacles = remaining
        for obstacle in self.obstacles:
            obstacle.scroll()

        # 2. Gravity
        self.bird.update()

        # 3. Collision ends the tick; nothing spawns on the frame the bird dies
        if self.physics.check_collision(self.bird, self.obstacles):
            self.game_over = True
            self.session.end()
            logger.info("Game over at tick %d: score %d, level %d",
                        self.tick_count, self.session.score, self.session.level)
            return True

        # 4. Spawn and score
        now = self.clock()
        if now - self.last_spawn_time >= self.config.spawn_interval:
            self._spawn_obstacle(now)

        return False

    def _spawn_obstacle(self, now: float):
        obstacle = Obstacle.random(self.config.max_obstacle_width, self.config.screen_size, self.rng)
        self.obstacles.append(obstacle)
        self.last_spawn_time = now
        logger.debug("Spawned %s obstacle %dx%d at column %d",
                     obstacle.color, obstacle.width, obstacle.height, obstacle.x)

        self.session.increase_score()
        if self.session.score % self.config.level_up_score == 0:
            self.session.increase_level()
            logger.info("Reached level %d", self.session.level)

    def jump(self):
        """Applies the jump impulse, unless the game is already over."""
        if not self.game_over:
            self.bird.jump()

    def restart(self):
        """Starts a fresh session on the same screen."""
        self.obstacles.clear()
        self.bird.reset()
        self.game_over = False
        self.last_spawn_time = self.clock()
        self.tick_count = 0
        self.session.start()
        logger.info("Game restarted")

    def is_game_over(self) -> bool:
        return self.game_over

    @property
    def score(self) -> int:
        return self.session.score

    @property
    def level(self) -> int:
        return self.session.level

    @property
    def best_score(self) -> int:
        return self.session.best_score
