"""
Opponent AI
===========
Rule-based, memoryless opponent. Each frame it dodges nearby enemy
shots, sometimes raises its guard when a shot is very close, twitches
around at random otherwise, and takes potshots when the enemy is near.

All randomness comes from an injected random.Random so a seeded run is
reproducible. Draws happen in a fixed order:
  one per panic-range threat, one wander roll (plus two for its
  direction when it triggers) if nothing threatened, one fire roll.
"""

import math
import random
from dataclasses import dataclass
from typing import Optional, Sequence

from stick_duel.config import (
    THREAT_RANGE, PANIC_RANGE, BLOCK_CHANCE,
    WANDER_CHANCE, FIRE_RANGE, FIRE_THRESHOLD,
    AI_BLOCK_DURATION, DEBUG_AI_DECISIONS
)
from stick_duel.combat.projectile import Projectile


@dataclass
class AIDecision:
    """What the opponent did this frame"""
    dx: int
    dy: int
    threatened: bool
    blocked: bool
    projectile: Optional[Projectile]
    reasoning: str


class OpponentAI:
    """
    Drives one fighter. Unlike the human side it does not emit an intent
    for someone else to apply: it moves, guards and fires directly, since
    the guard has to go up in the same evaluation that spots the danger.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

        # Stats
        self.decisions_made = 0
        self.evasions = 0
        self.panic_blocks = 0
        self.shots = 0

    def act(self, me, enemy, projectiles: Sequence[Projectile],
            now: float) -> AIDecision:
        """
        Run one frame of the policy for fighter `me`.
        Returns the decision; a fired projectile is in decision.projectile
        and is not added to any list here.
        """
        me.expire_block(now, AI_BLOCK_DURATION)

        dx, dy = 0, 0
        threatened = False
        blocked = False

        # Threat scan: last threatening projectile decides the direction
        for projectile in projectiles:
            if projectile.owner == me.player_id:
                continue

            distance_x = abs(projectile.x - me.x)
            distance_y = abs(projectile.y - me.y)
            if distance_x < THREAT_RANGE and distance_y < THREAT_RANGE:
                dx = 1 if projectile.x < me.x else -1
                dy = 1 if projectile.y < me.y else -1

                if (distance_x < PANIC_RANGE and distance_y < PANIC_RANGE and
                        self.rng.random() < BLOCK_CHANCE):
                    me.force_block(now)
                    blocked = True

                threatened = True

        # Idle wander
        if not threatened and self.rng.random() < WANDER_CHANCE:
            dx = 1 if self.rng.random() > 0.5 else -1
            dy = 1 if self.rng.random() > 0.5 else -1

        me.move(dx, dy)

        # Fire at the enemy from the post-move position
        angle = math.atan2(enemy.y - me.y, enemy.x - me.x)
        shoot_roll = self.rng.random()

        fired = None
        if (abs(enemy.x - me.x) < FIRE_RANGE and
                abs(enemy.y - me.y) < FIRE_RANGE and
                shoot_roll > FIRE_THRESHOLD):
            fired = me.fire_at(math.cos(angle), math.sin(angle))

        decision = AIDecision(
            dx=dx, dy=dy,
            threatened=threatened,
            blocked=blocked,
            projectile=fired,
            reasoning=self._describe(threatened, blocked, dx, dy, fired)
        )
        self._record(decision)
        return decision

    def _describe(self, threatened: bool, blocked: bool,
                  dx: int, dy: int, fired: Optional[Projectile]) -> str:
        if blocked:
            text = "Shot too close, guard up"
        elif threatened:
            text = "Evading incoming shot"
        elif dx or dy:
            text = "Wandering"
        else:
            text = "Holding position"
        if fired is not None:
            text += ", firing"
        return text

    def _record(self, decision: AIDecision):
        self.decisions_made += 1
        if decision.threatened:
            self.evasions += 1
        if decision.blocked:
            self.panic_blocks += 1
        if decision.projectile is not None:
            self.shots += 1

        if DEBUG_AI_DECISIONS:
            print(f"[AI] #{self.decisions_made} move=({decision.dx}, {decision.dy}) "
                  f"{decision.reasoning}")
