"""
Hit Regions
===========
Collision detection between a projectile and a fighter.
- Head: circle above the body, tested with distance to its centre
- Body: square around the fighter centre, tested per axis
Either region is enough for a hit.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from stick_duel.config import (
    HEAD_RADIUS, BODY_LENGTH, HALF_SIZE, BULLET_RADIUS
)


@dataclass
class HeadRegion:
    """Circle region, offset from the fighter centre"""
    y_offset: float = -(BODY_LENGTH + HEAD_RADIUS)
    radius: float = HEAD_RADIUS

    def get_center(self, fighter_x: float, fighter_y: float) -> Tuple[float, float]:
        return (fighter_x, fighter_y + self.y_offset)

    def contains(self, fighter_x: float, fighter_y: float,
                 px: float, py: float, point_radius: float = 0) -> bool:
        cx, cy = self.get_center(fighter_x, fighter_y)
        return math.hypot(px - cx, py - cy) < self.radius + point_radius


@dataclass
class BodyRegion:
    """Axis-aligned square centred on the fighter"""
    half_size: float = HALF_SIZE

    def get_rect(self, fighter_x: float,
                 fighter_y: float) -> Tuple[float, float, float, float]:
        """Rectangle (x, y, width, height) in world coordinates"""
        return (fighter_x - self.half_size, fighter_y - self.half_size,
                self.half_size * 2, self.half_size * 2)

    def contains(self, fighter_x: float, fighter_y: float,
                 px: float, py: float) -> bool:
        return (abs(px - fighter_x) < self.half_size and
                abs(py - fighter_y) < self.half_size)


HEAD = HeadRegion()
BODY = BodyRegion()


def get_hit_region(fighter_x: float, fighter_y: float,
                   px: float, py: float,
                   point_radius: float = BULLET_RADIUS) -> Optional[str]:
    """
    Return 'head' or 'body' for the region a projectile touches, or None.
    Head is checked first.
    """
    if HEAD.contains(fighter_x, fighter_y, px, py, point_radius):
        return 'head'
    if BODY.contains(fighter_x, fighter_y, px, py):
        return 'body'
    return None


def check_collision(fighter, projectile) -> bool:
    """True if the projectile overlaps the fighter's head or body"""
    return get_hit_region(fighter.x, fighter.y,
                          projectile.x, projectile.y,
                          projectile.radius) is not None
