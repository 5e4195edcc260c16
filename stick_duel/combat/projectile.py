"""
Projectile
==========
A bullet in flight. Only kinematic state lives here; drawing is the
renderer's job.
"""

from dataclasses import dataclass
from typing import Tuple

from stick_duel.config import (
    BULLET_SPEED, BULLET_RADIUS, ARENA_WIDTH, ARENA_HEIGHT
)


@dataclass
class Projectile:
    """
    owner is the player id of the fighter the projectile currently
    belongs to (0 or 1), never the fighter object itself.
    """
    x: float
    y: float
    dx: float
    dy: float
    owner: int
    speed: float = BULLET_SPEED
    radius: float = BULLET_RADIUS

    def advance(self):
        self.x += self.dx * self.speed
        self.y += self.dy * self.speed

    def is_out_of_bounds(self, width: float = ARENA_WIDTH,
                         height: float = ARENA_HEIGHT) -> bool:
        """Outside the arena rectangle on either axis"""
        return self.x < 0 or self.x > width or self.y < 0 or self.y > height

    def reflect(self, new_owner: int):
        """Bounce straight back and change sides"""
        self.dx = -self.dx
        self.dy = -self.dy
        self.owner = new_owner

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def direction(self) -> Tuple[float, float]:
        return (self.dx, self.dy)
