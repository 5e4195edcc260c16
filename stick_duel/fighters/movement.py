"""
Movement Controller
===================
Position, facing direction and arena clamping for a fighter.
"""

from dataclasses import dataclass
from typing import Tuple

from stick_duel.config import (
    PLAYER_SPEED, HALF_SIZE, ARENA_WIDTH, ARENA_HEIGHT, DEFAULT_FACING
)


@dataclass
class MovementController:
    """
    Frame-stepped movement on a fixed grid speed.
    Facing is the last nonzero (dx, dy) pair, stored raw.
    """
    x: float = 0
    y: float = 0

    facing_x: float = DEFAULT_FACING[0]
    facing_y: float = DEFAULT_FACING[1]

    speed: float = PLAYER_SPEED

    # Bounds
    min_x: float = HALF_SIZE
    max_x: float = ARENA_WIDTH - HALF_SIZE
    min_y: float = HALF_SIZE
    max_y: float = ARENA_HEIGHT - HALF_SIZE

    @classmethod
    def for_arena(cls, width: float, height: float,
                  margin: float = HALF_SIZE) -> 'MovementController':
        """Create a controller clamped to an arena of the given size"""
        return cls(min_x=margin, max_x=width - margin,
                   min_y=margin, max_y=height - margin)

    def move(self, dx: int, dy: int):
        """
        Step by (dx, dy) * speed.
        dx and dy are expected in {-1, 0, 1}; the caller guarantees that.
        """
        self.x += dx * self.speed
        self.y += dy * self.speed

        # A diagonal facing is longer than unit length; shots along it are faster.
        if dx != 0 or dy != 0:
            self.facing_x = dx
            self.facing_y = dy

        self.clamp()

    def clamp(self):
        """Keep position inside the arena minus the half-size margin"""
        self.x = max(self.min_x, min(self.max_x, self.x))
        self.y = max(self.min_y, min(self.max_y, self.y))

    def set_position(self, x: float, y: float):
        """Place directly, still clamped"""
        self.x = x
        self.y = y
        self.clamp()

    def get_position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def get_facing(self) -> Tuple[float, float]:
        return (self.facing_x, self.facing_y)
