"""Terminal side-scroller: a falling bird, scrolling floor blocks, one life."""

from .config import GameConfig
from .data_models import Bird, Obstacle, GameSession, GameStatus
from .exceptions import ConfigError, TermFlappyError
from .game_engine import GameEngine
from .physics_core import PhysicsCore

__all__ = [
    "Bird", "ConfigError", "GameConfig", "GameEngine", "GameSession",
    "GameStatus", "Obstacle", "PhysicsCore", "TermFlappyError",
]
