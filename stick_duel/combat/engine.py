"""
Combat Engine
=============
Advances projectiles and resolves their collisions each frame:
hits, guard reflections and arena exits.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from stick_duel.config import (
    CombatEventType, ARENA_WIDTH, ARENA_HEIGHT, DEBUG_HITBOXES
)
from stick_duel.combat.projectile import Projectile
from stick_duel.fighters.hitbox import check_collision, get_hit_region


@dataclass
class CombatEvent:
    """Something that happened to a projectile this frame"""
    event_type: CombatEventType
    position: Tuple[float, float]
    owner: int                       # owner before the event
    target: Optional[int] = None     # fighter that was hit or reflected
    hit_region: Optional[str] = None
    frame: int = 0


class CombatEngine:
    """
    Projectile resolution against a two-entry fighter table.
    fighters[i].player_id must equal i.
    """

    def __init__(self, arena_width: float = ARENA_WIDTH,
                 arena_height: float = ARENA_HEIGHT):
        self.arena_width = arena_width
        self.arena_height = arena_height
        self.frame = 0
        self.events: List[CombatEvent] = []

    def resolve(self, fighters: Sequence, projectiles: List[Projectile]) -> List[Projectile]:
        """
        Advance every projectile once and apply at most one outcome to it.
        Return the surviving projectiles in their incoming order.
        """
        self.frame += 1
        self.events = []
        survivors: List[Projectile] = []

        for projectile in projectiles:
            if self._update_projectile(projectile, fighters):
                survivors.append(projectile)

        return survivors

    def _update_projectile(self, projectile: Projectile, fighters: Sequence) -> bool:
        """Return True if the projectile stays in play"""
        projectile.advance()

        owner = fighters[projectile.owner]
        opponent = fighters[1 - projectile.owner]

        region = get_hit_region(opponent.x, opponent.y,
                                projectile.x, projectile.y, projectile.radius)
        if region is not None:
            if not opponent.is_blocking:
                self._record(CombatEventType.HIT, projectile, opponent, region)
                opponent.take_hit()
                owner.stats.record_hit()
                return False

            self._record(CombatEventType.REFLECT, projectile, opponent, region)
            projectile.reflect(opponent.player_id)
            opponent.stats.record_reflection()
        elif check_collision(owner, projectile):
            # Fresh or just-reflected shots overlap their owner: never a hit.
            pass

        # Reflected or not, a shot outside the arena leaves play this step
        if projectile.is_out_of_bounds(self.arena_width, self.arena_height):
            self._record(CombatEventType.EXPIRED, projectile)
            return False

        return True

    def _record(self, event_type: CombatEventType, projectile: Projectile,
                target=None, region: Optional[str] = None):
        event = CombatEvent(
            event_type=event_type,
            position=projectile.position,
            owner=projectile.owner,
            target=target.player_id if target is not None else None,
            hit_region=region,
            frame=self.frame
        )
        self.events.append(event)

        if DEBUG_HITBOXES and event_type != CombatEventType.EXPIRED:
            print(f"[Combat] frame {self.frame}: {event_type.value} on "
                  f"{event.target} ({region}) at "
                  f"({event.position[0]:.0f}, {event.position[1]:.0f})")

    def get_events(self, event_type: Optional[CombatEventType] = None) -> List[CombatEvent]:
        """Events from the last resolve, optionally filtered"""
        if event_type is None:
            return list(self.events)
        return [e for e in self.events if e.event_type == event_type]
