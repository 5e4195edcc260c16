"""
Simulation
==========
World state for one match and the per-frame step that advances it.

The step runs in a fixed order:
  1. human intent on fighter A
  2. opponent AI on fighter B
  3. guard expiry for both fighters
  4. projectile movement and collision resolution
  5. win check
The renderer only reads the state after a step has finished.
"""

import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from stick_duel.config import (
    ARENA_WIDTH, ARENA_HEIGHT, START_OFFSET_X, BLOCK_DURATION,
    CHARTREUSE, YELLOW
)
from stick_duel.fighters.fighter import Fighter
from stick_duel.combat.projectile import Projectile
from stick_duel.combat.engine import CombatEngine, CombatEvent
from stick_duel.ai.opponent import OpponentAI, AIDecision

PLAYER_A = 0
PLAYER_B = 1


@dataclass(frozen=True)
class Arena:
    """Fixed rectangle the match is played in"""
    width: float = ARENA_WIDTH
    height: float = ARENA_HEIGHT

    @property
    def center(self):
        return (self.width / 2, self.height / 2)


@dataclass(frozen=True)
class Intent:
    """
    One frame of requested actions.
    fire is one-shot: the producer clears it after a single frame.
    block is the held state of the guard control.
    """
    dx: int = 0
    dy: int = 0
    fire: bool = False
    block: bool = False


@dataclass(frozen=True)
class MatchResult:
    winner: Optional[int]    # player id, None for a draw
    frame: int

    @property
    def is_draw(self) -> bool:
        return self.winner is None


class Simulation:
    """
    One match. Build a new Simulation for a rematch; nothing is reset in place.
    rng seeds the default OpponentAI; a ready opponent_ai replaces it.
    """

    def __init__(self, arena: Optional[Arena] = None,
                 clock: Callable[[], float] = time.monotonic,
                 rng: Optional[random.Random] = None,
                 opponent_ai: Optional[OpponentAI] = None):
        if rng is not None and opponent_ai is not None:
            raise ValueError("pass rng or opponent_ai, not both; "
                             "an injected opponent_ai brings its own rng")

        self.arena = arena or Arena()
        self.clock = clock
        self.opponent_ai = opponent_ai or OpponentAI(rng)

        _, center_y = self.arena.center
        self.fighters: List[Fighter] = [
            Fighter("Player A", PLAYER_A, START_OFFSET_X, center_y,
                    color=CHARTREUSE,
                    arena_width=self.arena.width, arena_height=self.arena.height),
            Fighter("Player B", PLAYER_B, self.arena.width - START_OFFSET_X, center_y,
                    color=YELLOW,
                    arena_width=self.arena.width, arena_height=self.arena.height),
        ]
        self.projectiles: List[Projectile] = []
        self.combat_engine = CombatEngine(self.arena.width, self.arena.height)

        self.frame = 0
        self.result: Optional[MatchResult] = None
        self.events: List[CombatEvent] = []
        self.last_decision: Optional[AIDecision] = None
        self._block_held = False

    @property
    def player(self) -> Fighter:
        return self.fighters[PLAYER_A]

    @property
    def opponent(self) -> Fighter:
        return self.fighters[PLAYER_B]

    def step(self, intent: Intent) -> bool:
        """
        Advance one frame. Return True once the match has ended.
        After the end every call is a no-op.
        """
        if self.result is not None:
            return True

        self.frame += 1
        now = self.clock()

        self._apply_intent(self.player, intent, now)

        self.last_decision = self.opponent_ai.act(
            self.opponent, self.player, self.projectiles, now
        )
        if self.last_decision.projectile is not None:
            self.projectiles.append(self.last_decision.projectile)

        for fighter in self.fighters:
            fighter.expire_block(now, BLOCK_DURATION)

        self.projectiles = self.combat_engine.resolve(self.fighters, self.projectiles)
        self.events = self.combat_engine.events

        self._check_match_end()
        return self.result is not None

    def _apply_intent(self, fighter: Fighter, intent: Intent, now: float):
        fighter.move(intent.dx, intent.dy)

        if intent.fire:
            self.projectiles.append(fighter.fire())

        if intent.block:
            fighter.start_block(now)
        elif self._block_held:
            # Released this frame
            fighter.end_block()
        self._block_held = intent.block

    def _check_match_end(self):
        a, b = self.player, self.opponent
        if a.hit_points > 0 and b.hit_points > 0:
            return

        if a.hit_points <= 0 and b.hit_points <= 0:
            winner = None
        elif a.hit_points > 0:
            winner = PLAYER_A
        else:
            winner = PLAYER_B

        self.result = MatchResult(winner=winner, frame=self.frame)
        print(f"[Match] Ended on frame {self.frame}: {self.describe_result()}")

    def describe_result(self) -> str:
        if self.result is None:
            return "In progress"
        if self.result.is_draw:
            return "Draw!"
        return f"{self.fighters[self.result.winner].name} Wins!"
