"""
Fighter Class
=============
Main fighter entity that ties movement, stats and hit regions together.
"""

from typing import Dict, Any, Optional, Tuple

from stick_duel.config import (
    ARENA_WIDTH, ARENA_HEIGHT, WHITE
)
from stick_duel.fighters.stats import FighterStats
from stick_duel.fighters.movement import MovementController
from stick_duel.combat.projectile import Projectile


class Fighter:
    """
    One side of the duel.
    player_id is the stable handle projectiles use to refer to a fighter.
    A fighter lives for exactly one match; there is no reset.
    """

    def __init__(self, name: str, player_id: int,
                 x: float, y: float,
                 color: Tuple[int, int, int] = WHITE,
                 arena_width: float = ARENA_WIDTH,
                 arena_height: float = ARENA_HEIGHT,
                 stats: Optional[FighterStats] = None):
        self.name = name
        self.player_id = player_id
        self.color = color

        # Core systems
        self.stats = stats or FighterStats()
        self.movement = MovementController.for_arena(arena_width, arena_height)
        self.movement.set_position(x, y)

    # Position properties
    @property
    def x(self) -> float:
        return self.movement.x

    @property
    def y(self) -> float:
        return self.movement.y

    @property
    def position(self) -> Tuple[float, float]:
        return self.movement.get_position()

    @property
    def facing(self) -> Tuple[float, float]:
        return self.movement.get_facing()

    def move(self, dx: int, dy: int):
        self.movement.move(dx, dy)

    def fire(self) -> Projectile:
        """Shoot along the current facing from the fighter centre"""
        self.stats.record_shot()
        return Projectile(self.x, self.y, self.movement.facing_x,
                          self.movement.facing_y, self.player_id)

    def fire_at(self, dx: float, dy: float) -> Projectile:
        """Shoot along an explicit direction"""
        self.stats.record_shot()
        return Projectile(self.x, self.y, dx, dy, self.player_id)

    # Guard
    def start_block(self, now: float) -> bool:
        return self.stats.start_block(now)

    def force_block(self, now: float):
        self.stats.force_block(now)

    def end_block(self):
        self.stats.end_block()

    def expire_block(self, now: float, duration: float) -> bool:
        return self.stats.expire_block(now, duration)

    def take_hit(self):
        self.stats.take_hit()

    # Properties
    @property
    def hit_points(self) -> int:
        return self.stats.hit_points

    @property
    def is_blocking(self) -> bool:
        return self.stats.is_blocking

    @property
    def block_started_at(self):
        return self.stats.block_started_at

    @property
    def is_alive(self) -> bool:
        return self.stats.is_alive

    def get_state_info(self) -> Dict[str, Any]:
        """Snapshot for the renderer, HUD and debug output"""
        return {
            'name': self.name,
            'player_id': self.player_id,
            'x': self.x,
            'y': self.y,
            'facing': self.facing,
            'hit_points': self.hit_points,
            'is_blocking': self.is_blocking,
            'shots_fired': self.stats.shots_fired,
            'hits_landed': self.stats.hits_landed,
            'reflections': self.stats.reflections,
        }

    def __repr__(self) -> str:
        return (f"Fighter({self.name!r}, id={self.player_id}, "
                f"pos=({self.x:.0f}, {self.y:.0f}), hp={self.hit_points})")
