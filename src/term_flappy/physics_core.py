"""
physics_core.py: The deterministic kinematic step and collision logic.
"""

from dataclasses import dataclass
from typing import Iterable, TYPE_CHECKING

from .constants import GRAVITY, JUMP_VELOCITY, UPDATE_INTERVAL, MAX_VELOCITY

if TYPE_CHECKING:
    from .data_models import Bird, Obstacle


@dataclass(frozen=True)
class PhysicsCore:
    """
    Shared deterministic physics used by the bird and the engine.
    """
    gravity: float = GRAVITY
    jump_velocity: float = JUMP_VELOCITY
    dt: float = UPDATE_INTERVAL
    max_velocity: float = MAX_VELOCITY

    def apply_gravity_and_movement(self, y: float, velocity: float,
                                   ceiling: float, floor: float) -> tuple[float, float]:
        """
        Calculates new position and velocity after one fixed timestep (dt).

        Touching the floor or the ceiling pins the position to that bound
        and zeroes the velocity; there is no bounce.
        """
        # Terminal velocity is enforced before the step, not after it
        velocity = min(velocity, self.max_velocity)

        new_y = y + velocity * self.dt + 0.5 * self.gravity * self.dt ** 2

        if new_y > floor:
            return floor, 0.0
        if new_y < ceiling:
            return ceiling, 0.0
        return new_y, velocity + self.gravity

    def flap(self) -> float:
        """Returns the instantaneous velocity after a jump."""
        return self.jump_velocity

    def check_collision(self, bird: "Bird", obstacles: Iterable["Obstacle"]) -> bool:
        """
        True when the bird overlaps any obstacle.

        Obstacles always reach the floor and the bird never goes below it,
        so only the bird's bottom edge is compared against an obstacle top.
        """
        bird_left = bird.leftmost_x
        bird_right = bird.rightmost_x
        bird_bottom = bird.bottom_y

        for obstacle in obstacles:
            if (bird_right >= obstacle.leftmost_x
                    and bird_left <= obstacle.rightmost_x
                    and bird_bottom >= obstacle.top_y):
                return True
        return False
